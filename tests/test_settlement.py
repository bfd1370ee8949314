"""
Settlement math without a database: splits and expenses are plain transient
ORM objects.
"""
import uuid

import pytest

from expense_tracker.core.errors import NotFoundError
from expense_tracker.core.settlement import (
    ExpenseSums,
    can_view_pot,
    get_sum,
    settle_pot,
    visible_expenses,
)
from expense_tracker.db.base import Expense, Pot, PotMember, Split

from .conftest import ALICE, BOB, CAROL, MALLORY

DAVE = uuid.UUID("01913042-053a-4cb2-846d-4b58153185b8")
ERIN = uuid.UUID("60755204-45d7-4f0d-96e6-bf61e6f3feda")


def split(user_id, amount, is_paid, expense_id=1):
    return Split(expense_id=expense_id, user_id=user_id, amount=amount, is_paid=is_paid)


class TestGetSum:

    def test_owner_is_viewer_single_own_split(self):
        splits = [split(ALICE, 42.0, True)]

        assert get_sum(ALICE, ALICE, splits) == 0.0

    def test_owner_is_viewer_nothing_paid(self):
        splits = [
            split(ALICE, 42.0, True),
            split(BOB, 42.0, False),
            split(CAROL, 42.0, False),
        ]

        assert get_sum(ALICE, ALICE, splits) == 84.0

    def test_owner_is_viewer_some_paid(self):
        splits = [
            split(ALICE, 42.0, True),
            split(BOB, 42.0, False),
            split(CAROL, 42.0, False),
            split(DAVE, 42.0, True),
            split(ERIN, 42.0, True),
        ]

        assert get_sum(ALICE, ALICE, splits) == 84.0

    def test_debtor_viewer_owes_own_share(self):
        splits = [
            split(ALICE, 42.0, True),
            split(BOB, 42.0, False),
            split(CAROL, 42.0, False),
        ]

        assert get_sum(ALICE, BOB, splits) == -42.0

    def test_debtor_viewer_already_paid(self):
        splits = [
            split(ALICE, 42.0, True),
            split(BOB, 42.0, True),
            split(CAROL, 42.0, False),
        ]

        assert get_sum(ALICE, BOB, splits) == 0.0

    def test_duplicate_viewer_splits_accumulate(self):
        splits = [
            split(ALICE, 42.0, True),
            split(BOB, 42.0, True),
            split(BOB, 42.0, False),
            split(BOB, 42.0, False),
            split(CAROL, 42.0, False),
        ]

        assert get_sum(ALICE, BOB, splits) == -84.0

    def test_uninvolved_viewer_gets_zero(self):
        splits = [
            split(ALICE, 42.0, True),
            split(BOB, 42.0, False),
            split(CAROL, 42.0, False),
        ]

        assert get_sum(ALICE, MALLORY, splits) == 0.0

    def test_owner_split_ignored_even_when_flagged_unpaid(self):
        splits = [split(ALICE, 100.0, False), split(BOB, 10.0, False)]

        assert get_sum(ALICE, ALICE, splits) == 10.0
        assert get_sum(ALICE, BOB, splits) == -10.0

    def test_empty_splits(self):
        assert get_sum(ALICE, ALICE, []) == 0.0
        assert get_sum(ALICE, BOB, []) == 0.0

    @pytest.mark.parametrize("viewer", [ALICE, BOB, CAROL, MALLORY])
    def test_all_paid_is_zero_for_everyone(self, viewer):
        splits = [split(ALICE, 5.0, True), split(BOB, 7.5, True), split(CAROL, 1.25, True)]

        assert get_sum(ALICE, viewer, splits) == 0.0

    def test_same_inputs_same_output(self):
        splits = [split(ALICE, 3.0, True), split(BOB, 2.5, False), split(CAROL, 0.1, False)]

        assert get_sum(ALICE, ALICE, splits) == get_sum(ALICE, ALICE, splits)
        assert get_sum(ALICE, ALICE, splits) == pytest.approx(2.6)


def make_pot(owner=ALICE, members=(), expenses=()):
    return Pot(
        id=7,
        owner_id=owner,
        name="Flat",
        default_currency_id=1,
        members=[PotMember(user_id=m) for m in (owner, *members)],
        expenses=list(expenses),
    )


def make_expense(expense_id, owner, splits):
    return Expense(id=expense_id, owner_id=owner, description="x", currency_id=1, splits=splits)


class TestExpenseSums:

    def test_breakdown_and_total_agree(self):
        expenses = [
            make_expense(1, ALICE, [split(ALICE, 10.0, True), split(BOB, 10.0, False)]),
            make_expense(2, BOB, [split(BOB, 30.0, True), split(ALICE, 30.0, False)]),
            make_expense(3, CAROL, [split(CAROL, 5.0, True), split(BOB, 5.0, False)]),
        ]

        sums = ExpenseSums(ALICE, expenses)

        assert list(sums) == [(1, 10.0), (2, -30.0), (3, 0.0)]
        assert sums.total() == -20.0
        assert sum(amount for _, amount in sums) == sums.total()

    def test_iteration_is_restartable(self):
        expenses = (
            make_expense(i, ALICE, [split(BOB, 1.0, False, expense_id=i)])
            for i in range(3)
        )

        sums = ExpenseSums(ALICE, expenses)

        assert list(sums) == list(sums)
        assert len(sums) == 3

    def test_no_expenses(self):
        sums = ExpenseSums(ALICE, [])

        assert list(sums) == []
        assert sums.total() == 0.0


class TestVisibility:

    def test_owner_and_members_can_view(self):
        pot = make_pot(members=[BOB])

        assert can_view_pot(pot, ALICE)
        assert can_view_pot(pot, BOB)
        assert not can_view_pot(pot, MALLORY)

    def test_visible_expenses_filters_by_pot_access(self):
        mine = make_pot(members=[BOB])
        other = make_pot(owner=MALLORY)
        e1 = make_expense(1, ALICE, [])
        e2 = make_expense(2, MALLORY, [])
        e1.pot = mine
        e2.pot = other

        assert visible_expenses(BOB, [e1, e2]) == [e1]

    def test_settle_pot_rejects_outsiders_before_computing(self):
        pot = make_pot(members=[BOB])

        with pytest.raises(NotFoundError):
            settle_pot(pot, MALLORY)

    def test_settle_pot_for_member(self):
        pot = make_pot(
            members=[BOB],
            expenses=[make_expense(1, ALICE, [split(ALICE, 20.0, True), split(BOB, 20.0, False)])],
        )

        assert settle_pot(pot, BOB).total() == -20.0
        assert settle_pot(pot, ALICE).total() == 20.0
