"""
Currency Module

Supported currency codes, the currency-tagged Money value type and the
shared rounding policy. NEVER uses float for monetary values.
"""

from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP
from dataclasses import dataclass
from enum import Enum


REPORTING_PLACES = 2


class UnknownCurrency(ValueError):
    """Raised when text does not name a supported currency"""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Unknown currency: {text!r}")


class CurrencyMismatch(ValueError):
    """Raised when Money values in different currencies are combined"""

    def __init__(self, left: 'CurrencyCode', right: 'CurrencyCode', operation: str = "combine"):
        self.left = left
        self.right = right
        super().__init__(f"Cannot {operation} {left.code} and {right.code}")


class CurrencyCode(Enum):
    """Supported ISO 4217 currency codes with display symbol"""
    GBP = ("GBP", "£")  # British Pound
    EUR = ("EUR", "€")  # Euro
    USD = ("USD", "$")  # US Dollar

    def __init__(self, code: str, symbol: str):
        self.code = code
        self.symbol = symbol

    def __str__(self) -> str:
        return self.code

    @classmethod
    def parse(cls, text: str) -> 'CurrencyCode':
        """
        Parse free text into a currency code

        Matching is case-insensitive; the canonical form is uppercase.

        Raises:
            UnknownCurrency: If the text is not a supported code
        """
        if not isinstance(text, str):
            raise UnknownCurrency(text)

        member = cls.__members__.get(text.strip().upper())
        if member is None:
            raise UnknownCurrency(text)
        return member


def round_half_even(amount: Decimal, places: int = REPORTING_PLACES) -> Decimal:
    """
    Round to a fixed number of decimal places using banker's rounding.

    This is the only rounding applied when a fractional amount becomes a
    reported figure: 0.125 -> 0.12, 0.135 -> 0.14.
    """
    return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True)
class Money:
    """
    Immutable money representation with currency.

    The amount is stored at full precision; rounding happens only through
    rounded() or for display.
    """
    amount: Decimal
    currency: CurrencyCode

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        if not isinstance(self.currency, CurrencyCode):
            raise TypeError(f"Money currency must be a CurrencyCode, got {self.currency!r}")

    @classmethod
    def zero(cls, currency: CurrencyCode) -> 'Money':
        return cls(Decimal('0'), currency)

    def _check_currency(self, other, operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot {operation} Money and {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatch(self.currency, other.currency, operation)

    def add(self, other: 'Money') -> 'Money':
        """Currency-checked addition"""
        self._check_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def __add__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def __neg__(self) -> 'Money':
        return Money(-self.amount, self.currency)

    def __lt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: 'Money') -> bool:
        self._check_currency(other, "compare")
        return self.amount >= other.amount

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.amount == Decimal('0')

    def rounded(self, places: int = REPORTING_PLACES) -> 'Money':
        """Apply the reporting rounding policy"""
        return Money(round_half_even(self.amount, places), self.currency)

    def to_string(self) -> str:
        """Format for display: symbol followed by exactly two decimals"""
        shown = self.amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        if shown.is_zero():
            shown = shown.copy_abs()
        return f"{self.currency.symbol}{shown:.2f}"

    def __str__(self) -> str:
        return self.to_string()
