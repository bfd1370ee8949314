import pytest

from expense_tracker.core.errors import ConflictError, ForbiddenError, LockedError, NotFoundError
from expense_tracker.core.guards import (
    build_splits,
    ensure_can_add_member,
    ensure_can_remove_member,
    ensure_not_archived,
    ensure_pot_deletable,
    has_unpaid_splits,
)
from expense_tracker.db.base import Expense, Pot, PotMember, Split
from expense_tracker.schemas.expense import SplitInput

from .conftest import ALICE, BOB, CAROL, MALLORY


def pot_with_splits(*paid_flags, archived=False):
    expense = Expense(
        id=1,
        owner_id=ALICE,
        description="Groceries",
        currency_id=1,
        splits=[
            Split(expense_id=1, user_id=uid, amount=10.0, is_paid=paid)
            for uid, paid in zip([ALICE, BOB, CAROL], paid_flags)
        ],
    )
    return Pot(
        id=3,
        owner_id=ALICE,
        name="Flat",
        default_currency_id=1,
        archived=archived,
        members=[PotMember(user_id=ALICE), PotMember(user_id=BOB)],
        expenses=[expense],
    )


class TestDeletePot:

    def test_unpaid_splits_block_deletion(self):
        pot = pot_with_splits(True, False)

        assert has_unpaid_splits(pot)
        with pytest.raises(ConflictError) as exc:
            ensure_pot_deletable(pot, ALICE)

        assert exc.value.status_code == 409
        assert exc.value.detail == "Cannot delete pot with id 3 because there are unpaid expenses"

    def test_non_owner_is_forbidden_before_conflict(self):
        pot = pot_with_splits(True, False)

        with pytest.raises(ForbiddenError) as exc:
            ensure_pot_deletable(pot, BOB)

        assert exc.value.status_code == 403
        assert exc.value.detail == "The user does not own the pot with id 3"

    def test_all_paid_can_be_deleted(self):
        pot = pot_with_splits(True, True, True)

        assert not has_unpaid_splits(pot)
        ensure_pot_deletable(pot, ALICE)

    def test_pot_without_expenses(self):
        pot = Pot(id=4, owner_id=ALICE, name="Empty", default_currency_id=1, members=[], expenses=[])

        ensure_pot_deletable(pot, ALICE)


class TestMembership:

    def test_add_existing_member_conflicts(self):
        pot = pot_with_splits(True)

        with pytest.raises(ConflictError) as exc:
            ensure_can_add_member(pot, ALICE, BOB)

        assert exc.value.detail == f"User {BOB} was previously added to pot 3"

    def test_add_requires_owner(self):
        pot = pot_with_splits(True)

        with pytest.raises(ForbiddenError):
            ensure_can_add_member(pot, BOB, CAROL)

    def test_add_new_member(self):
        ensure_can_add_member(pot_with_splits(True), ALICE, CAROL)

    def test_remove_non_member(self):
        pot = pot_with_splits(True)

        with pytest.raises(NotFoundError) as exc:
            ensure_can_remove_member(pot, ALICE, MALLORY)

        assert exc.value.detail == f"User {MALLORY} was not part of pot 3"

    def test_owner_cannot_be_removed(self):
        with pytest.raises(ConflictError):
            ensure_can_remove_member(pot_with_splits(True), ALICE, ALICE)

    def test_remove_requires_owner(self):
        with pytest.raises(ForbiddenError):
            ensure_can_remove_member(pot_with_splits(True), BOB, BOB)

    def test_archived_pot_is_locked(self):
        with pytest.raises(LockedError) as exc:
            ensure_not_archived(pot_with_splits(True, archived=True))

        assert exc.value.status_code == 423


class TestBuildSplits:

    def test_owner_split_is_paid(self):
        splits = build_splits(9, ALICE, [
            SplitInput(user_id=ALICE, amount=5),
            SplitInput(user_id=BOB, amount=5),
        ])

        assert [(s.user_id, s.is_paid) for s in splits] == [(ALICE, True), (BOB, False)]
        assert all(s.expense_id == 9 for s in splits)

    def test_first_entry_per_user_wins(self):
        splits = build_splits(9, ALICE, [
            SplitInput(user_id=BOB, amount=5),
            SplitInput(user_id=BOB, amount=50),
            SplitInput(user_id=CAROL, amount=7),
        ])

        assert [(s.user_id, s.amount) for s in splits] == [(BOB, 5), (CAROL, 7)]
