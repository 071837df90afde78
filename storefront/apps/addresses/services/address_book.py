import logging

from apps.common.errors import NotFoundError, ValidationError
from apps.common.validation import clean_instance, require_mapping

from ..models import Address

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = (
    'first_name', 'last_name', 'company', 'address_1', 'address_2', 'city',
    'state', 'postal_code', 'country', 'phone', 'email', 'additional_info',
)


def format_address(address):
    """Single-line rendering copied into an order as shipping or billing text."""
    return "{}, {}, {} {}, {}".format(
        address.address_1, address.city, address.state, address.postal_code, address.country,
    )


def address_to_dict(address):
    record = {'id': address.id, 'user_id': address.user_id}
    for name in ADDRESS_FIELDS:
        record[name] = getattr(address, name)
    record['formatted'] = format_address(address)
    record['created_at'] = address.created_at
    record['updated_at'] = address.updated_at
    return record


def list_addresses(user_id):
    return list(Address.objects.filter(user_id=user_id).order_by('id'))


def get_address(user_id, address_id):
    address = Address.objects.filter(user_id=user_id, id=address_id).first()
    if not address:
        raise NotFoundError('Address', address_id)
    return address


def create_address(user_id, data):
    address = Address(user_id=user_id, **_address_values(data))
    clean_instance(address, exclude=['user'])
    address.save()
    logger.info("ADDRESS  | user: %s | created address %s", user_id, address.id)
    return address


def update_address(user_id, address_id, data):
    address = get_address(user_id, address_id)
    for name, value in _address_values(data).items():
        setattr(address, name, value)
    clean_instance(address, exclude=['user'])
    address.save()
    return address


def delete_address(user_id, address_id):
    address = get_address(user_id, address_id)
    address.delete()
    logger.info("ADDRESS  | user: %s | deleted address %s", user_id, address_id)


def _address_values(data):
    require_mapping(data)
    unknown = sorted(set(data) - set(ADDRESS_FIELDS) - {'id', 'user_id'})
    if unknown:
        raise ValidationError({name: ['Unknown field.'] for name in unknown})

    values = {}
    for name in ADDRESS_FIELDS:
        value = data.get(name)
        if value is None:
            value = ''
        if not isinstance(value, str):
            raise ValidationError({name: ['Not a valid string.']})
        values[name] = value.strip()
    return values
