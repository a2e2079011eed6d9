"""Module for selecting the transactions shown on a statement."""
from datetime import datetime
from typing import NamedTuple

from bank_kata.core.types import TransactionType
from bank_kata.domain.transaction import Transaction


class StatementFilter(NamedTuple):
    """Criteria selecting statement lines.

    Unset criteria match everything. ``start`` is inclusive and ``end`` is
    exclusive; both must be timezone-aware.
    """

    transaction_types: frozenset[TransactionType] | None = None
    start: datetime | None = None
    end: datetime | None = None

    @classmethod
    def of_types(cls, *transaction_types: TransactionType) -> "StatementFilter":
        """Build a filter keeping only the given transaction types."""
        return cls(transaction_types=frozenset(transaction_types))

    def validate(self) -> None:
        """Check the filter bounds are usable."""
        for bound in (self.start, self.end):
            if bound is not None and bound.tzinfo is None:
                raise ValueError(f"Statement filter bounds must be timezone-aware: {bound}")
        if self.start is not None and self.end is not None and self.end < self.start:
            raise ValueError(
                f"Statement filter ends before it starts: {self.start} > {self.end}"
            )

    def matches(self, transaction: Transaction) -> bool:
        """Check if a transaction satisfies every criterion."""
        if (
            self.transaction_types is not None
            and transaction.type not in self.transaction_types
        ):
            return False
        if self.start is not None and transaction.timestamp < self.start:
            return False
        if self.end is not None and transaction.timestamp >= self.end:
            return False
        return True
