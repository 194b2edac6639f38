"""
Domain models for invoice forwarding.

Design Decisions:
- Frozen dataclass so an invoice cannot change between filtering and sending
- Decimal for all monetary values to avoid floating-point errors
- Equality by field comparison, no separate identity
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

# Invoices strictly below this amount are forwarded
LOW_VALUE_THRESHOLD = Decimal("100")

# Amounts must fit NUMERIC(12, 2) exactly
MAX_INTEGER_DIGITS = 10
DECIMAL_PLACES = 2
_CENT = Decimal(1).scaleb(-DECIMAL_PLACES)
_LIMIT = Decimal(1).scaleb(MAX_INTEGER_DIGITS)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce a numeric amount to Decimal.

    Floats go through ``str`` so that 0.1 becomes Decimal("0.1") rather
    than its binary expansion.

    Raises:
        ValueError: If the value is not numeric, not finite, or does not
            fit MAX_INTEGER_DIGITS integer digits and DECIMAL_PLACES decimals
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid invoice value: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Invalid invoice value: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invoice value must be finite, got {value!r}")
    if abs(amount) >= _LIMIT:
        raise ValueError(
            f"Invoice value has more than {MAX_INTEGER_DIGITS} integer digits: {value!r}"
        )
    if amount.quantize(_CENT) != amount:
        raise ValueError(
            f"Invoice value has more than {DECIMAL_PLACES} decimal places: {value!r}"
        )
    return amount


@dataclass(frozen=True)
class Invoice:
    """
    A business invoice: who is billed and for how much.

    ``value`` accepts ints, floats and numeric strings and is stored as
    Decimal, so ``Invoice("ACME", 50) == Invoice("ACME", Decimal("50.00"))``.
    """
    customer: str
    value: Decimal

    def __post_init__(self) -> None:
        """Validate customer and normalize value."""
        if not isinstance(self.customer, str) or not self.customer.strip():
            raise ValueError("Invoice customer must not be empty")
        object.__setattr__(self, "value", to_decimal(self.value))

    def is_low_value(self, threshold: Decimal = LOW_VALUE_THRESHOLD) -> bool:
        """True if the amount is strictly below the threshold."""
        return self.value < threshold
