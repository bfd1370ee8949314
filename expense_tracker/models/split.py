from sqlalchemy import Column, Integer, Float, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from expense_tracker.db.session import Base

class Split(Base):
    """One user's share of an expense. The user owes the expense owner the amount
    until the split is paid."""

    __tablename__ = "expense_splits"

    expense_id = Column(Integer, ForeignKey("expenses.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Uuid, ForeignKey("users.id"), primary_key=True)
    amount = Column(Float, nullable=False)
    is_paid = Column(Boolean, nullable=False, default=False)

    expense = relationship("Expense", back_populates="splits")
