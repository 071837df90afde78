from apps.common.validation import ValidationResult

MAX_PAYMENT_METHOD_LENGTH = 50
REQUIRED_TEXT_FIELDS = ('shipping_address', 'billing_address', 'payment_method')


class CheckoutValidator:
    """Validates checkout input before any cart or order row is touched."""

    def validate(self, data):
        errors = {}
        cleaned = {}

        for name in REQUIRED_TEXT_FIELDS:
            value = data.get(name)
            if value is None:
                errors[name] = ['This field is required.']
            elif not isinstance(value, str):
                errors[name] = ['Not a valid string.']
            elif not value.strip():
                errors[name] = ['This field may not be blank.']
            else:
                cleaned[name] = value.strip()

        method = cleaned.get('payment_method')
        if method and len(method) > MAX_PAYMENT_METHOD_LENGTH:
            errors['payment_method'] = [
                'Ensure this field has no more than {} characters.'.format(MAX_PAYMENT_METHOD_LENGTH),
            ]

        notes = data.get('notes')
        if notes is not None and not isinstance(notes, str):
            errors['notes'] = ['Not a valid string.']
        elif notes and notes.strip():
            cleaned['notes'] = notes.strip()
        else:
            cleaned['notes'] = None

        return ValidationResult(not errors, errors=errors, cleaned=cleaned)
