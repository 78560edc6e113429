"""Fixed-point money helpers (Algerian dinar, two decimal places)."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY = "DZD"
CENT = Decimal("0.01")

# Largest value a Numeric(10, 2) column holds
MAX_AMOUNT = Decimal("99999999.99")


def to_money(value, limit: Decimal | None = MAX_AMOUNT) -> Decimal:
    """Coerce ``value`` to a two-place ``Decimal``.

    Floats go through ``str`` first so ``19.99`` stays ``19.99``.
    Raises ``ValueError`` for values that are not numbers or exceed ``limit``;
    pass ``limit=None`` for figures that are never stored in a single column.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError):
        raise ValueError(f"Not a monetary amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Not a monetary amount: {value!r}")
    try:
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Amount is too large: {value!r}") from None
    if limit is not None and abs(amount) > limit:
        raise ValueError(f"Amount exceeds {limit}: {value!r}")
    return amount


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    return to_money(unit_price * quantity)
