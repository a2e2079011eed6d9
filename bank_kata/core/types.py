"""Module containing custom types for the bank_kata package."""
import enum

from bank_kata.i18n import _


class TransactionType(enum.StrEnum):
    """The kind of event recorded in an account's transaction log.

    The enum *value* is a language-neutral key.
    Use :attr:`display_name` for the user-facing translated label.
    """

    ACCOUNT_OPEN = enum.auto()
    DEPOSIT = enum.auto()
    WITHDRAW = enum.auto()

    @property
    def display_name(self) -> str:
        """Return the translated display name for this transaction type."""
        return _(_LABELS[self])

    @property
    def sign(self) -> int:
        """Return -1 for transactions taking money out, 1 otherwise."""
        return -1 if self is TransactionType.WITHDRAW else 1


_LABELS = {
    TransactionType.ACCOUNT_OPEN: "Open",
    TransactionType.DEPOSIT: "Deposit",
    TransactionType.WITHDRAW: "Withdraw",
}
