"""
Order placement.

Turns a user's cart into an order in one transaction: the cart lines are
row-locked, totalled from their snapshot prices, copied into order items and
deleted. Either all of that is committed or none of it is.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction

from apps.cart.services import cart_store
from apps.catalog.models import Product
from apps.common.errors import EmptyCartError, StorageError, ValidationError
from apps.common.money import fits_digits, line_total, to_money

from ..models import Order, OrderItem
from .validators import CheckoutValidator

logger = logging.getLogger(__name__)

# Column limit of Order.total_amount and OrderItem.total.
TOTAL_MAX_DIGITS = 12


def place_order(user_id, shipping_address, billing_address, payment_method, notes=None):
    """Convert the user's cart into an order. Returns ``(order, items)``.

    Raises ``ValidationError`` for bad input or a total too large to store, and
    ``EmptyCartError`` when there is nothing to buy; neither has side effects. A database failure while
    writing rolls everything back and surfaces as ``StorageError``.
    """
    validation = CheckoutValidator().validate({
        'shipping_address': shipping_address,
        'billing_address': billing_address,
        'payment_method': payment_method,
        'notes': notes,
    })
    if not validation.is_valid:
        raise ValidationError(validation.errors)

    try:
        with transaction.atomic():
            order, items = _place_order_locked(user_id, validation.cleaned)
    except DatabaseError as e:
        logger.exception("CHECKOUT | user: %s | rolled back: %s", user_id, e)
        raise StorageError() from e

    logger.info(
        "CHECKOUT | user: %s | order: %s | items: %d | total: %s",
        user_id, order.id, len(items), order.total_amount,
    )
    return order, items


def _place_order_locked(user_id, data):
    # The user row is the per-user lock; a concurrent checkout for the same
    # user blocks here until this transaction ends, then sees the empty cart.
    _lock_user(user_id)
    lines = cart_store.lock_lines(user_id)
    if not lines:
        raise EmptyCartError(user_id)

    titles = dict(
        Product.objects
        .filter(id__in={line.product_id for line in lines})
        .values_list('id', 'title')
    )

    total_amount = to_money(sum(line_total(line.price, line.quantity) for line in lines))
    # Line totals never exceed the order total; this bounds OrderItem.total too.
    if not fits_digits(total_amount, TOTAL_MAX_DIGITS):
        raise ValidationError({
            'cart': ['Order total exceeds {} digits.'.format(TOTAL_MAX_DIGITS)],
        })

    order = Order.objects.create(
        user_id=user_id,
        total_amount=total_amount,
        shipping_address=data['shipping_address'],
        billing_address=data['billing_address'],
        payment_method=data['payment_method'],
        notes=data.get('notes'),
    )

    items = OrderItem.objects.bulk_create([
        OrderItem(
            order=order,
            product_id=line.product_id,
            product_title=titles.get(line.product_id, ''),
            quantity=line.quantity,
            price=to_money(line.price),
            total=line_total(line.price, line.quantity),
        )
        for line in lines
    ])

    cleared = cart_store.clear_all(user_id)
    logger.debug("CHECKOUT | user: %s | cleared %d cart line(s)", user_id, cleared)
    return order, items


def _lock_user(user_id):
    User = get_user_model()
    list(User.objects.select_for_update().filter(pk=user_id).values_list('pk', flat=True))
