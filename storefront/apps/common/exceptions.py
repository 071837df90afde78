from rest_framework.response import Response
from rest_framework.views import exception_handler

from .errors import EmptyCartError, NotFoundError, StorageError, ValidationError


def storefront_exception_handler(exc, context):
    """Map storefront errors onto the ``{'error': ...}`` response shape.

    Anything that is not a storefront error is left to DRF.
    """
    if isinstance(exc, ValidationError):
        return Response({'error': 'Validation failed', 'errors': exc.errors}, status=422)

    if isinstance(exc, EmptyCartError):
        return Response({'error': str(exc)}, status=400)

    if isinstance(exc, NotFoundError):
        return Response({'error': str(exc)}, status=404)

    if isinstance(exc, StorageError):
        return Response({'error': str(exc)}, status=500)

    return exception_handler(exc, context)
