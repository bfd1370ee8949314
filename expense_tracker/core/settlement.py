"""
Settlement math over splits and expenses that are already loaded into memory.

Nothing in here touches the database: the services fetch pots, expenses and
splits and pass them in. Anything with ``user_id``, ``amount`` and ``is_paid``
works as a split; anything with ``id``, ``owner_id`` and ``splits`` works as an
expense.
"""
from typing import Iterable, Iterator, Tuple
from uuid import UUID

from expense_tracker.core.errors import NotFoundError


def get_sum(owner_id: UUID, viewer_id: UUID, splits: Iterable) -> float:
    """
    Signed balance of ``viewer_id`` for one expense paid by ``owner_id``.

    Positive: others still owe the viewer this much.
    Negative: the viewer owes the expense owner this much.
    Zero: everything is paid or the viewer is not involved.
    """
    total = 0.0

    for split in splits:
        if split.is_paid or split.user_id == owner_id:
            continue

        # we only care about money owed TO the viewer or BY the viewer
        if viewer_id == owner_id:
            total += split.amount
        elif split.user_id == viewer_id:
            total -= split.amount

    return total


class ExpenseSums:
    """
    Per-expense settlement amounts for one viewer.

    Iterating yields ``(expense_id, amount)`` pairs and can be repeated;
    ``total()`` folds the same iteration so breakdown and total never disagree.
    """

    def __init__(self, viewer_id: UUID, expenses: Iterable):
        self.viewer_id = viewer_id
        self._expenses = list(expenses)

    def __iter__(self) -> Iterator[Tuple[int, float]]:
        for expense in self._expenses:
            yield expense.id, get_sum(expense.owner_id, self.viewer_id, expense.splits)

    def __len__(self) -> int:
        return len(self._expenses)

    def total(self) -> float:
        return sum((amount for _, amount in self), 0.0)


def can_view_pot(pot, viewer_id: UUID) -> bool:
    return viewer_id == pot.owner_id or viewer_id in pot.member_ids


def visible_expenses(viewer_id: UUID, expenses: Iterable) -> list:
    return [e for e in expenses if can_view_pot(e.pot, viewer_id)]


def settle_pot(pot, viewer_id: UUID) -> ExpenseSums:
    # invisible pots look exactly like missing ones
    if not can_view_pot(pot, viewer_id):
        raise NotFoundError(f"Pot {pot.id} not found")

    return ExpenseSums(viewer_id, pot.expenses)
