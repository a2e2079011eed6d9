"""A module for representing amounts of money."""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from functools import total_ordering

_CENT = Decimal("0.01")

MoneyLike = Decimal | float | int | str


def _to_decimal(value: MoneyLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # Going through str keeps 99.9 as 99.9 instead of its binary expansion
    return Decimal(str(value))


@total_ordering
@dataclass(frozen=True, eq=False)
class Money:
    """An amount of money in a single implied currency."""

    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))

    def add(self, delta: "Money") -> "Money":
        """Return the sum of this amount and *delta*."""
        return Money(self.amount + delta.amount)

    def subtract(self, delta: "Money") -> "Money":
        """Return this amount minus *delta*, which may be negative."""
        return Money(self.amount - delta.amount)

    def less_than(self, other: "Money") -> bool:
        """Check if this amount is strictly smaller than *other*."""
        return self.amount < other.amount

    def is_negative(self) -> bool:
        """Check if the amount is below zero."""
        return self.amount < 0

    def rounded(self) -> Decimal:
        """Return the amount rounded half-up to cents."""
        return self.amount.quantize(_CENT, rounding=ROUND_HALF_UP)

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Money":
        return Money(-self.amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount == other.amount

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __hash__(self) -> int:
        return hash(self.amount)

    def __repr__(self) -> str:
        return f"Money({self.amount})"

    def __str__(self) -> str:
        rounded = self.rounded()
        sign = "-" if rounded < 0 else ""
        return f"{sign}${abs(rounded):,.2f}"


ZERO = Money(Decimal(0))
