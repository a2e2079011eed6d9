"""Transaction module."""
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Iterable

from bank_kata.core.formatting import DEFAULT_ZONE, format_timestamp
from bank_kata.core.money import ZERO, Money
from bank_kata.core.types import TransactionType
from bank_kata.i18n import _


@dataclass(frozen=True)
class Transaction:
    """
    A single balance-affecting event of an account.
    The amount is always the delta of the event, never the resulting balance.
    """

    type: TransactionType
    amount: Money
    timestamp: datetime

    @property
    def signed_amount(self) -> Money:
        """The amount with the sign of its effect on the balance."""
        return -self.amount if self.type.sign < 0 else self.amount

    def render(self, zone: tzinfo = DEFAULT_ZONE) -> str:
        """Render the transaction as an activity line and a date/time line."""
        return (
            f"{_('Activity')}: {self.type.display_name} {self.amount}\n"
            f"{format_timestamp(self.timestamp, zone)}"
        )

    def __str__(self) -> str:
        return self.render()


def balance_of(transactions: Iterable[Transaction]) -> Money:
    """Replay a transaction log and return the balance it leads to."""
    balance = ZERO
    for transaction in transactions:
        balance = balance.add(transaction.signed_amount)
    return balance
