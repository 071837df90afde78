"""Error taxonomy shared by the cart, address book, catalog and checkout."""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    pass


class ValidationError(StorefrontError):
    """Raised when input is malformed or out of range.

    ``errors`` maps a field name to a list of messages.
    """

    def __init__(self, errors):
        self.errors = errors
        fields = ', '.join(sorted(errors))
        super().__init__("Invalid input: {}".format(fields))


class EmptyCartError(StorefrontError):
    """Raised when checkout is attempted with no cart lines."""

    def __init__(self, user_id=None):
        self.user_id = user_id
        super().__init__("Cart is empty")


class NotFoundError(StorefrontError):
    """Raised when a resource does not exist or is not owned by the caller."""

    def __init__(self, resource, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__("{} not found".format(resource))


class StorageError(StorefrontError):
    """Raised when the order placement transaction fails and is rolled back."""

    def __init__(self, message="Could not place order"):
        super().__init__(message)
