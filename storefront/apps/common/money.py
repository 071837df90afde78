from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal('0.01')


def to_money(value):
    """Coerce ``value`` to a two-place Decimal, rounding half up."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(price, quantity):
    return to_money(to_money(price) * int(quantity))


def fits_digits(amount, max_digits, decimal_places=2):
    """Whether ``amount`` fits a ``DecimalField(max_digits, decimal_places)`` column."""
    return abs(amount) < Decimal(10) ** (max_digits - decimal_places)
