from collections import defaultdict

from apps.catalog.services.catalog_store import display_records
from apps.common.errors import NotFoundError

from ..models import Order, OrderItem


def item_to_dict(item, product=None):
    return {
        'id': item.id,
        'order_id': item.order_id,
        'product_id': item.product_id,
        'product_title': item.product_title,
        'quantity': item.quantity,
        'price': str(item.price),
        'total': str(item.total),
        'subtotal': str(item.subtotal),
        'notes': item.notes,
        'product': product,
    }


def order_to_dict(order, items, products=None):
    products = products if products is not None else display_records(i.product_id for i in items)
    return {
        'id': order.id,
        'user_id': order.user_id,
        'status': order.status,
        'total_amount': str(order.total_amount),
        'shipping_address': order.shipping_address,
        'billing_address': order.billing_address,
        'payment_method': order.payment_method,
        'transaction_id': order.transaction_id,
        'notes': order.notes,
        'created_at': order.created_at,
        'updated_at': order.updated_at,
        'items': [item_to_dict(item, products.get(item.product_id)) for item in items],
    }


def list_for_user(user_id):
    """The user's orders, newest first, each with its items."""
    orders = list(Order.objects.filter(user_id=user_id).order_by('-created_at', '-id'))
    items_by_order = _items_for(order.id for order in orders)
    products = display_records(
        item.product_id for items in items_by_order.values() for item in items
    )
    return [order_to_dict(order, items_by_order.get(order.id, []), products) for order in orders]


def get_one(user_id, order_id):
    order = Order.objects.filter(user_id=user_id, id=order_id).first()
    if not order:
        raise NotFoundError('Order', order_id)
    items = _items_for([order.id]).get(order.id, [])
    return order_to_dict(order, items)


def _items_for(order_ids):
    grouped = defaultdict(list)
    for item in OrderItem.objects.filter(order_id__in=list(order_ids)).order_by('id'):
        grouped[item.order_id].append(item)
    return grouped
