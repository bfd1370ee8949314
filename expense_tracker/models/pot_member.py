from sqlalchemy import Column, ForeignKey, Integer, Uuid
from expense_tracker.db.session import Base
from sqlalchemy.orm import relationship

class PotMember(Base):
    __tablename__ = "pots_to_users"

    pot_id = Column(Integer, ForeignKey("pots.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)

    pot = relationship("Pot", back_populates="members")
