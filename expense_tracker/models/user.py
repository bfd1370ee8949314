from sqlalchemy import Column, String, Uuid
from expense_tracker.db.session import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    name = Column(String, nullable=False)
