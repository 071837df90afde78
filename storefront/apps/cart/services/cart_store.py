"""
Per-user cart lines.

Every function takes the owning ``user_id`` explicitly. Lines carry the
price the user saw when the line was written; reads never refresh it from
the live catalog.
"""
import logging

from apps.catalog.models import Product
from apps.catalog.services.catalog_store import display_records
from apps.common.errors import NotFoundError, ValidationError
from apps.common.money import line_total, to_money

from ..models import CartLine
from .validators import CartLineValidator

logger = logging.getLogger(__name__)


def line_to_dict(line, product=None):
    record = {
        'id': line.id,
        'user_id': line.user_id,
        'product_id': line.product_id,
        'quantity': line.quantity,
        'price': str(to_money(line.price)),
        'line_total': str(line_total(line.price, line.quantity)),
        'created_at': line.created_at,
        'updated_at': line.updated_at,
    }
    if product is not None:
        record['product'] = product
    return record


def list_lines(user_id):
    """All of the user's lines, each joined with a short product record."""
    lines = list(CartLine.objects.filter(user_id=user_id).order_by('id'))
    products = display_records(line.product_id for line in lines)
    return [line_to_dict(line, products.get(line.product_id)) for line in lines]


def upsert_line(user_id, product_id, quantity, price):
    """Create the (user, product) line or overwrite its quantity and price.

    Last write wins: calling this twice leaves one line holding the second
    call's values.
    """
    result = CartLineValidator().validate_upsert({
        'product_id': product_id, 'quantity': quantity, 'price': price,
    })
    if not result.is_valid:
        raise ValidationError(result.errors)

    cleaned = result.cleaned
    if not Product.objects.filter(id=cleaned['product_id']).exists():
        raise ValidationError({'product_id': ['Product does not exist.']})

    line, created = CartLine.objects.update_or_create(
        user_id=user_id,
        product_id=cleaned['product_id'],
        defaults={'quantity': cleaned['quantity'], 'price': cleaned['price']},
    )
    logger.info(
        "CART     | user: %s | product: %s | qty: %s | %s",
        user_id, line.product_id, line.quantity, 'created' if created else 'updated',
    )
    return line_to_dict(line)


def update_quantity(user_id, line_id, quantity):
    result = CartLineValidator().validate_quantity({'quantity': quantity})
    if not result.is_valid:
        raise ValidationError(result.errors)

    line = _owned_line(user_id, line_id)
    line.quantity = result.cleaned['quantity']
    line.save(update_fields=['quantity', 'updated_at'])
    return line_to_dict(line)


def remove_line(user_id, line_id):
    line = _owned_line(user_id, line_id)
    line.delete()
    logger.info("CART     | user: %s | removed line %s", user_id, line_id)


def clear_all(user_id):
    """Delete every line the user has. Returns the number of lines removed."""
    deleted, _ = CartLine.objects.filter(user_id=user_id).delete()
    return deleted


def lock_lines(user_id):
    """The user's lines as model instances, row-locked until the surrounding transaction ends."""
    return list(
        CartLine.objects
        .select_for_update()
        .filter(user_id=user_id)
        .order_by('id')
    )


def cart_summary(user_id):
    lines = CartLine.objects.filter(user_id=user_id).values_list('price', 'quantity')
    subtotal = to_money(0)
    line_count = 0
    item_count = 0
    for price, quantity in lines:
        line_count += 1
        item_count += quantity
        subtotal += line_total(price, quantity)
    return {
        'line_count': line_count,
        'item_count': item_count,
        'subtotal': str(subtotal),
    }


def _owned_line(user_id, line_id):
    line = CartLine.objects.filter(user_id=user_id, id=line_id).first()
    if not line:
        raise NotFoundError('Cart item', line_id)
    return line
