"""Tests for StatementFilter."""

from datetime import datetime, timedelta, timezone

import pytest

from bank_kata.core.money import Money
from bank_kata.core.types import TransactionType
from bank_kata.domain.statement_filter import StatementFilter
from bank_kata.domain.transaction import Transaction

OPEN_TIME = datetime(2020, 2, 10, 17, 3, 3, tzinfo=timezone.utc)


def _make_transaction(
    transaction_type: TransactionType = TransactionType.DEPOSIT,
    timestamp: datetime = OPEN_TIME,
) -> Transaction:
    return Transaction(transaction_type, Money(10), timestamp)


class TestMatches:
    """Tests for StatementFilter.matches."""

    def test_empty_filter_matches_everything(self) -> None:
        """Unset criteria accept any transaction."""
        statement_filter = StatementFilter()
        for transaction_type in TransactionType:
            assert statement_filter.matches(_make_transaction(transaction_type))

    def test_type_filter(self) -> None:
        """Only the listed types are kept."""
        statement_filter = StatementFilter.of_types(TransactionType.DEPOSIT)
        assert statement_filter.matches(_make_transaction(TransactionType.DEPOSIT))
        assert not statement_filter.matches(_make_transaction(TransactionType.WITHDRAW))

    def test_start_is_inclusive(self) -> None:
        """A transaction at the start instant is kept."""
        statement_filter = StatementFilter(start=OPEN_TIME)
        assert statement_filter.matches(_make_transaction(timestamp=OPEN_TIME))
        assert not statement_filter.matches(
            _make_transaction(timestamp=OPEN_TIME - timedelta(seconds=1))
        )

    def test_end_is_exclusive(self) -> None:
        """A transaction at the end instant is dropped."""
        statement_filter = StatementFilter(end=OPEN_TIME)
        assert not statement_filter.matches(_make_transaction(timestamp=OPEN_TIME))
        assert statement_filter.matches(
            _make_transaction(timestamp=OPEN_TIME - timedelta(seconds=1))
        )


class TestValidate:
    """Tests for StatementFilter.validate."""

    def test_naive_bound_is_rejected(self) -> None:
        """Bounds must be timezone-aware."""
        with pytest.raises(ValueError, match="timezone-aware"):
            StatementFilter(start=datetime(2020, 2, 10)).validate()

    def test_reversed_bounds_are_rejected(self) -> None:
        """The end cannot precede the start."""
        with pytest.raises(ValueError, match="ends before it starts"):
            StatementFilter(start=OPEN_TIME, end=OPEN_TIME - timedelta(days=1)).validate()

    def test_valid_bounds(self) -> None:
        """Ordered aware bounds pass."""
        StatementFilter(start=OPEN_TIME, end=OPEN_TIME + timedelta(days=1)).validate()
