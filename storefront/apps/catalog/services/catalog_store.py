import logging

from apps.common.errors import NotFoundError, ValidationError
from apps.common.validation import clean_instance, require_mapping

from ..models import Product

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'title', 'description', 'category', 'brand', 'sku', 'price',
    'discount_percentage', 'rating', 'stock', 'availability_status',
    'minimum_order_quantity', 'weight', 'dimensions', 'warranty_information',
    'shipping_information', 'return_policy', 'tags', 'reviews', 'meta',
    'thumbnail', 'images',
)

DISPLAY_FIELDS = ('id', 'title', 'thumbnail', 'price', 'availability_status')


def product_to_dict(product):
    return {
        'id': product.id,
        'title': product.title,
        'description': product.description,
        'category': product.category,
        'brand': product.brand,
        'sku': product.sku,
        'price': str(product.price),
        'discount_percentage': str(product.discount_percentage),
        'discounted_price': str(product.discounted_price),
        'rating': str(product.rating) if product.rating is not None else None,
        'stock': product.stock,
        'availability_status': product.availability_status,
        'minimum_order_quantity': product.minimum_order_quantity,
        'weight': str(product.weight) if product.weight is not None else None,
        'dimensions': product.dimensions,
        'warranty_information': product.warranty_information,
        'shipping_information': product.shipping_information,
        'return_policy': product.return_policy,
        'tags': product.tags,
        'reviews': product.reviews,
        'meta': product.meta,
        'thumbnail': product.thumbnail,
        'images': product.images,
        'created_at': product.created_at,
        'updated_at': product.updated_at,
    }


def display_records(product_ids):
    """Short product records keyed by id, for joining onto cart lines and order items."""
    rows = Product.objects.filter(id__in=set(product_ids)).values(*DISPLAY_FIELDS)
    records = {}
    for row in rows:
        row['price'] = str(row['price'])
        records[row['id']] = row
    return records


def list_products(category=None, brand=None, availability_status=None, search=None):
    qs = Product.objects.all()
    if category:
        qs = qs.filter(category=category)
    if brand:
        qs = qs.filter(brand=brand)
    if availability_status:
        if availability_status not in Product.AvailabilityStatus.values:
            raise ValidationError({
                'availability_status': ['"{}" is not a valid choice.'.format(availability_status)],
            })
        qs = qs.filter(availability_status=availability_status)
    if search:
        qs = qs.filter(title__icontains=search)
    return list(qs)


def get_product(product_id):
    product = Product.objects.filter(id=product_id).first()
    if not product:
        raise NotFoundError('Product', product_id)
    return product


def create_product(data):
    product = Product(**_editable(data))
    clean_instance(product)
    product.save()
    logger.info("CATALOG  | created product %s (%s)", product.id, product.title)
    return product


def update_product(product_id, data, partial=False):
    product = get_product(product_id)
    values = _editable(data)
    if not partial:
        missing = [name for name in ('title', 'description', 'price') if name not in values]
        if missing:
            raise ValidationError({name: ['This field is required.'] for name in missing})
    for name, value in values.items():
        setattr(product, name, value)
    clean_instance(product)
    product.save()
    logger.info("CATALOG  | updated product %s", product.id)
    return product


def delete_product(product_id):
    product = get_product(product_id)
    product.delete()
    logger.info("CATALOG  | deleted product %s", product_id)


def _editable(data):
    require_mapping(data)
    unknown = sorted(set(data) - set(EDITABLE_FIELDS) - {'id'})
    if unknown:
        raise ValidationError({name: ['Unknown field.'] for name in unknown})
    values = {name: data[name] for name in EDITABLE_FIELDS if name in data}
    if values.get('sku') == '':
        values['sku'] = None
    return values
