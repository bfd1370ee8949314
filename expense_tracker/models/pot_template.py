import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from expense_tracker.db.session import Base


class Occurrence(str, enum.Enum):
    """How often a new pot should be created from a template."""

    once = "once"
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


class PotTemplate(Base):
    __tablename__ = "pot_templates"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    name = Column(String, nullable=False)
    default_currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)
    occurrence = Column(Enum(Occurrence, native_enum=False), nullable=False, default=Occurrence.once)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    users = relationship(
        "PotTemplateUser",
        back_populates="template",
        cascade="all, delete-orphan"
    )


class PotTemplateUser(Base):
    __tablename__ = "pot_template_users"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    pot_template_id = Column(Integer, ForeignKey("pot_templates.id", ondelete="CASCADE"), nullable=False)

    template = relationship("PotTemplate", back_populates="users")
