"""Tests for input validation at the cart and checkout boundaries."""

from decimal import Decimal

import pytest

from apps.cart.services.validators import CartLineValidator, parse_int, parse_price, parse_quantity
from apps.orders.services.validators import CheckoutValidator


class TestParseQuantity:
    @pytest.mark.parametrize('value, expected', [(1, 1), ('3', 3), (2.0, 2)])
    def test_valid(self, value, expected):
        assert parse_quantity(value) == (expected, None)

    @pytest.mark.parametrize('value', [0, -2, '', None, 'x', 1.5, True, float('inf'), 2147483648])
    def test_invalid(self, value):
        quantity, error = parse_quantity(value)
        assert quantity is None
        assert error

    def test_upper_bound(self):
        assert parse_quantity(2147483647) == (2147483647, None)


class TestParseInt:
    @pytest.mark.parametrize('value, expected', [(7, 7), ('7', 7), (7.0, 7)])
    def test_valid(self, value, expected):
        assert parse_int(value) == (expected, None)

    @pytest.mark.parametrize('value', [True, False, 1.9, 'seven', None, ''])
    def test_invalid(self, value):
        number, error = parse_int(value)
        assert number is None
        assert error


class TestParsePrice:
    def test_valid(self):
        assert parse_price('5.50') == (Decimal('5.50'), None)
        assert parse_price(0) == (Decimal('0'), None)
        assert parse_price('99999999.99') == (Decimal('99999999.99'), None)

    def test_too_many_digits(self):
        price, error = parse_price('100000000')
        assert price is None
        assert error == 'Ensure that there are no more than 10 digits in total.'

    @pytest.mark.parametrize('value', ['-0.01', 'NaN', 'Infinity', '1.234', None, False, '123456789012.00'])
    def test_invalid(self, value):
        price, error = parse_price(value)
        assert price is None
        assert error


class TestCartLineValidator:
    def test_collects_every_field_error(self):
        result = CartLineValidator().validate_upsert({'product_id': 'abc', 'quantity': 0, 'price': '-1'})

        assert not result.is_valid
        assert set(result.errors) == {'product_id', 'quantity', 'price'}

    def test_float_product_id_is_not_truncated(self):
        result = CartLineValidator().validate_upsert({'product_id': 1.9, 'quantity': 1, 'price': '1.00'})

        assert set(result.errors) == {'product_id'}


class TestCheckoutValidator:
    def valid(self, **overrides):
        data = {
            'shipping_address': ' 1 Main St ',
            'billing_address': '1 Main St',
            'payment_method': 'cash_on_delivery',
        }
        data.update(overrides)
        return data

    def test_valid_input_is_trimmed(self):
        result = CheckoutValidator().validate(self.valid())

        assert result.is_valid
        assert result.cleaned['shipping_address'] == '1 Main St'
        assert result.cleaned['notes'] is None

    def test_missing_fields(self):
        result = CheckoutValidator().validate({})

        assert not result.is_valid
        assert set(result.errors) == {'shipping_address', 'billing_address', 'payment_method'}

    def test_non_string_fields(self):
        result = CheckoutValidator().validate(self.valid(shipping_address=42, notes=['x']))

        assert set(result.errors) == {'shipping_address', 'notes'}

    def test_payment_method_too_long(self):
        result = CheckoutValidator().validate(self.valid(payment_method='x' * 51))

        assert 'payment_method' in result.errors

    def test_blank_notes_become_none(self):
        result = CheckoutValidator().validate(self.valid(notes='   '))

        assert result.is_valid
        assert result.cleaned['notes'] is None
