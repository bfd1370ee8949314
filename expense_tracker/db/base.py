# Import ALL models here so relationships resolve and Base.metadata is complete.
from expense_tracker.db.session import Base
from expense_tracker.models.user import User
from expense_tracker.models.currency import Currency
from expense_tracker.models.pot import Pot
from expense_tracker.models.pot_member import PotMember
from expense_tracker.models.expense import Expense
from expense_tracker.models.split import Split
from expense_tracker.models.pot_template import PotTemplate, PotTemplateUser

__all__ = [
    "Base",
    "User",
    "Currency",
    "Pot",
    "PotMember",
    "Expense",
    "Split",
    "PotTemplate",
    "PotTemplateUser",
]
