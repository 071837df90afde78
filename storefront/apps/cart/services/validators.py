from decimal import Decimal, InvalidOperation

from apps.common.money import fits_digits
from apps.common.validation import ValidationResult

# Column limits of CartLine.quantity and CartLine.price.
MAX_QUANTITY = 2147483647
PRICE_MAX_DIGITS = 10


def parse_int(value):
    """Return ``(number, error)`` for an integer given as int, digit string or whole float."""
    if value is None or value == '':
        return None, 'This field is required.'
    if isinstance(value, bool):
        return None, 'A valid integer is required.'
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None, 'A valid integer is required.'
    if isinstance(value, float) and value != number:
        return None, 'A valid integer is required.'
    return number, None


def parse_quantity(value):
    """Return ``(quantity, error)``; quantity must be an integer of at least 1."""
    quantity, error = parse_int(value)
    if error:
        return None, error
    if quantity < 1:
        return None, 'Ensure this value is greater than or equal to 1.'
    if quantity > MAX_QUANTITY:
        return None, 'Ensure this value is less than or equal to {}.'.format(MAX_QUANTITY)
    return quantity, None


def parse_price(value):
    """Return ``(price, error)``; price must be a non-negative amount with at most two decimals."""
    if value is None or value == '':
        return None, 'This field is required.'
    if isinstance(value, bool):
        return None, 'A valid number is required.'
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None, 'A valid number is required.'
    if not price.is_finite():
        return None, 'A valid number is required.'
    if price < 0:
        return None, 'Ensure this value is greater than or equal to 0.'
    if price.as_tuple().exponent < -2:
        return None, 'Ensure that there are no more than 2 decimal places.'
    if not fits_digits(price, PRICE_MAX_DIGITS):
        return None, 'Ensure that there are no more than {} digits in total.'.format(PRICE_MAX_DIGITS)
    return price, None


class CartLineValidator:
    """Checks add-to-cart and quantity-change input before it reaches the database."""

    def validate_upsert(self, data):
        errors = {}
        cleaned = {}

        product_id, error = parse_int(data.get('product_id'))
        if error:
            errors['product_id'] = ['A valid product id is required.']
        cleaned['product_id'] = product_id

        quantity, error = parse_quantity(data.get('quantity'))
        if error:
            errors['quantity'] = [error]
        cleaned['quantity'] = quantity

        price, error = parse_price(data.get('price'))
        if error:
            errors['price'] = [error]
        cleaned['price'] = price

        return ValidationResult(not errors, errors=errors, cleaned=cleaned)

    def validate_quantity(self, data):
        quantity, error = parse_quantity(data.get('quantity'))
        if error:
            return ValidationResult(False, errors={'quantity': [error]})
        return ValidationResult(True, cleaned={'quantity': quantity})
