from typing import Iterable, List
from uuid import UUID

from expense_tracker.core.errors import ConflictError, ForbiddenError, LockedError, NotFoundError
from expense_tracker.models.split import Split


def ensure_pot_owner(pot, requester_id: UUID):
    if pot.owner_id != requester_id:
        raise ForbiddenError(f"The user does not own the pot with id {pot.id}")


def ensure_not_archived(pot):
    if pot.archived:
        raise LockedError(f"Pot {pot.id} is archived")


def has_unpaid_splits(pot) -> bool:
    return any(
        not split.is_paid
        for expense in pot.expenses
        for split in expense.splits
    )


def ensure_pot_deletable(pot, requester_id: UUID):
    """A pot can only be deleted by its owner once every split in it is paid."""
    ensure_pot_owner(pot, requester_id)

    if has_unpaid_splits(pot):
        raise ConflictError(
            f"Cannot delete pot with id {pot.id} because there are unpaid expenses"
        )


def ensure_can_add_member(pot, requester_id: UUID, user_id: UUID):
    ensure_pot_owner(pot, requester_id)

    if user_id in pot.member_ids:
        raise ConflictError(f"User {user_id} was previously added to pot {pot.id}")


def ensure_can_remove_member(pot, requester_id: UUID, user_id: UUID):
    ensure_pot_owner(pot, requester_id)

    if user_id not in pot.member_ids:
        raise NotFoundError(f"User {user_id} was not part of pot {pot.id}")

    if user_id == pot.owner_id:
        raise ConflictError("The owner cannot be removed from their own pot")


def build_splits(expense_id: int, owner_id: UUID, new_splits: Iterable) -> List[Split]:
    """
    Turns caller supplied ``(user_id, amount)`` entries into Split rows for the
    given expense.

    The owner's split is marked as paid since the owner fronted the money.
    A user listed more than once keeps only their first entry.
    """
    seen = set()
    splits = []

    for s in new_splits:
        if s.user_id in seen:
            continue
        seen.add(s.user_id)

        splits.append(Split(
            expense_id=expense_id,
            user_id=s.user_id,
            amount=s.amount,
            is_paid=s.user_id == owner_id
        ))

    return splits
