from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Boolean, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, false
from expense_tracker.db.session import Base

class Pot(Base):
    """A pot is an accumulation of expenses owned by a single user and shared with
    its members. The owner is always a member as well."""

    __tablename__ = "pots"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    name = Column(String, nullable=False)
    default_currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    archived = Column(Boolean, nullable=False, server_default=false())
    archived_at = Column(DateTime(timezone=True), nullable=True)

    members = relationship(
        "PotMember",
        back_populates="pot",
        cascade="all, delete-orphan"
    )

    expenses = relationship(
        "Expense",
        back_populates="pot",
        cascade="all, delete-orphan"
    )

    @property
    def member_ids(self):
        return {m.user_id for m in self.members} | {self.owner_id}
