from collections.abc import Mapping

from django.core.exceptions import ValidationError as DjangoValidationError

from .errors import ValidationError


def clean_instance(instance, exclude=None):
    """Run model validation and re-raise failures as a storefront ValidationError."""
    try:
        instance.full_clean(exclude=exclude)
    except DjangoValidationError as e:
        raise ValidationError(e.message_dict) from e


def require_mapping(data):
    """Request bodies must be JSON objects; arrays and scalars are rejected."""
    if not isinstance(data, Mapping):
        raise ValidationError({'non_field_errors': ['Expected an object.']})
    return data


class ValidationResult:
    def __init__(self, is_valid, errors=None, cleaned=None):
        self.is_valid = is_valid
        self.errors = errors or {}
        self.cleaned = cleaned or {}
