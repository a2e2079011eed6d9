"""Custom exception hierarchy for bank_kata."""

from bank_kata.core.money import Money


class BankKataError(Exception):
    """Base exception for all bank_kata errors."""


class InsufficientFundsError(BankKataError):
    """A withdrawal would drive the balance below zero."""

    def __init__(self, balance: Money, requested: Money) -> None:
        super().__init__(
            f"Insufficient funds: cannot withdraw {requested} from a balance of {balance}"
        )
        self.balance = balance
        self.requested = requested


class InvalidAmountError(BankKataError):
    """A negative amount was given where only non-negative ones make sense."""

    def __init__(self, amount: Money) -> None:
        super().__init__(f"Amount must not be negative: {amount}")
        self.amount = amount


class UnknownTimeZoneError(BankKataError):
    """The configured time zone cannot be resolved."""

    def __init__(self, name: str | None) -> None:
        super().__init__(f"Unknown time zone: {name!r}")
        self.name = name
