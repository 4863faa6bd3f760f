"""Currency display helpers. Amounts are Decimal dollars; no float."""

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Coerce a wire amount to a Decimal rounded to cents.

    Floats go through str() so 12.1 becomes Decimal("12.10"), not its binary expansion.
    """
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def amount_to_display(amount: Decimal) -> str:
    """Format as USD: Decimal("1234.5") -> '$1,234.50', Decimal("-12") -> '-$12.00'."""
    quantized = to_amount(amount)
    if quantized < 0:
        return f"-${-quantized:,.2f}"
    return f"${quantized:,.2f}"
