from sqlalchemy import Column, Integer, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from expense_tracker.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    pot_id = Column(Integer, ForeignKey("pots.id", ondelete="CASCADE"), nullable=False)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    description = Column(String, nullable=False)
    currency_id = Column(Integer, ForeignKey("currencies.id"), nullable=False)

    pot = relationship("Pot", back_populates="expenses")
    currency = relationship("Currency")
    splits = relationship("Split", back_populates="expense", cascade="all, delete-orphan")
