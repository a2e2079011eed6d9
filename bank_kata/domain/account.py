"""This module contains the Account class."""
import logging
from datetime import tzinfo

from bank_kata.core.clock import Clock, SystemClock
from bank_kata.core.formatting import DEFAULT_ZONE, format_timestamp
from bank_kata.core.money import ZERO, Money
from bank_kata.core.types import TransactionType
from bank_kata.domain.statement_filter import StatementFilter
from bank_kata.domain.transaction import Transaction
from bank_kata.exceptions import InsufficientFundsError, InvalidAmountError
from bank_kata.i18n import _

logger = logging.getLogger(__name__)

_SEPARATOR = "\n\n"


def _check_not_negative(amount: Money) -> None:
    if amount.is_negative():
        raise InvalidAmountError(amount)


class Account:
    """
    A bank account you can deposit to, withdraw from and transfer between.

    Every change of the balance, including the opening, is recorded as a
    transaction stamped with the account clock. The log is append-only and
    its order is chronological.

    Not safe for concurrent use: callers sharing an account between threads
    must serialize every call, and hold both accounts for a transfer.
    """

    def __init__(
        self,
        balance: Money = ZERO,
        clock: Clock | None = None,
        *,
        zone: tzinfo = DEFAULT_ZONE,
    ) -> None:
        _check_not_negative(balance)
        self.clock: Clock = clock if clock is not None else SystemClock()
        self._zone = zone
        self._balance = balance
        self._transactions: list[Transaction] = []
        self._record(TransactionType.ACCOUNT_OPEN, balance)

    @property
    def balance(self) -> Money:
        """The current balance."""
        return self._balance

    @property
    def zone(self) -> tzinfo:
        """The time zone used to render slips and statements."""
        return self._zone

    def _record(self, transaction_type: TransactionType, amount: Money) -> None:
        transaction = Transaction(transaction_type, amount, self.clock.now())
        self._transactions.append(transaction)
        logger.debug(
            "Recorded %s of %s at %s, balance is now %s",
            transaction_type,
            amount,
            transaction.timestamp.isoformat(),
            self._balance,
        )

    def deposit(self, delta: Money) -> None:
        """Add *delta* to the balance."""
        _check_not_negative(delta)
        self._balance = self._balance.add(delta)
        self._record(TransactionType.DEPOSIT, delta)

    def withdraw(self, delta: Money) -> None:
        """Take *delta* out of the balance.

        Raises:
            InsufficientFundsError: If the balance is smaller than *delta*.
                The account is left unchanged.
        """
        _check_not_negative(delta)
        if self._balance.less_than(delta):
            logger.info(
                "Refused withdrawal of %s from a balance of %s", delta, self._balance
            )
            raise InsufficientFundsError(self._balance, delta)
        self._balance = self._balance.subtract(delta)
        self._record(TransactionType.WITHDRAW, delta)

    def transfer(self, to_account: "Account", delta: Money) -> None:
        """Move *delta* from this account to *to_account*.

        The target is only credited once the withdrawal succeeded.

        Raises:
            InsufficientFundsError: If this account cannot cover *delta*.
        """
        self.withdraw(delta)
        to_account.deposit(delta)

    def transactions(self) -> tuple[Transaction, ...]:
        """Return the transaction log in chronological order."""
        return tuple(self._transactions)

    def balance_slip(self) -> str:
        """Render the current balance and the current date and time."""
        return (
            f"{_('Balance')}: {self._balance}\n"
            f"{format_timestamp(self.clock.now(), self._zone)}"
        )

    def statement(self, statement_filter: StatementFilter | None = None) -> str:
        """Render the transaction history followed by a balance slip.

        Args:
            statement_filter: Optional criteria restricting the listed
                transactions. The balance slip is always included.
        """
        transactions = self._transactions
        if statement_filter is not None:
            statement_filter.validate()
            transactions = [t for t in transactions if statement_filter.matches(t)]
        sections = [transaction.render(self._zone) for transaction in transactions]
        sections.append(self.balance_slip())
        return _SEPARATOR.join(sections)

    def __repr__(self) -> str:
        return f"Account(balance={self._balance!r}, transactions={len(self._transactions)})"
