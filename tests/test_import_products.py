"""Tests for the catalog import from the DummyJSON API."""

from decimal import Decimal
from io import StringIO

import httpx
import pytest
from django.core.management import CommandError, call_command

from apps.catalog.models import Product
from apps.catalog.services import importer as importer_module
from apps.catalog.services.importer import CatalogImportError, ProductImporter

REMOTE_PRODUCTS = [
    {
        'id': 1,
        'title': 'Essence Mascara Lash Princess',
        'description': 'Popular mascara.',
        'category': 'beauty',
        'price': 9.99,
        'discountPercentage': 7.17,
        'rating': 4.94,
        'stock': 5,
        'tags': ['beauty', 'mascara'],
        'brand': 'Essence',
        'weight': 2,
        'dimensions': {'width': 23.17, 'height': 14.43, 'depth': 28.01},
        'warrantyInformation': '1 month warranty',
        'shippingInformation': 'Ships in 1 month',
        'reviews': [{'rating': 2, 'comment': 'Very unhappy with my purchase!'}],
        'returnPolicy': '30 days return policy',
        'minimumOrderQuantity': 24,
        'meta': {'barcode': '9164035109868', 'qrCode': 'https://example.com/qr.png'},
        'thumbnail': 'https://cdn.dummyjson.com/products/1/thumbnail.png',
        'images': ['https://cdn.dummyjson.com/products/1/1.png'],
    },
    {
        'id': 2,
        'title': 'Plain Apple',
        'description': 'An apple.',
        'category': 'groceries',
        'price': 1.5,
        'stock': 0,
        'reviews': [],
        'thumbnail': 'https://cdn.dummyjson.com/products/2/thumbnail.png',
        'images': [],
    },
]


def client_for(payload, status_code=200, seen=None):
    def handler(request):
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.mark.django_db
class TestProductImporter:
    def test_imports_and_maps_fields(self):
        seen = []
        importer = ProductImporter(url='https://catalog.test/products', client=client_for(
            {'products': REMOTE_PRODUCTS}, seen=seen,
        ))

        result = importer.run(count=2)

        assert (result.fetched, result.imported, result.skipped) == (2, 2, 0)
        assert seen[0].url.params['limit'] == '2'

        mascara = Product.objects.get(sku='API-1')
        assert mascara.price == Decimal('9.99')
        assert mascara.brand == 'Essence'
        assert mascara.availability_status == Product.AvailabilityStatus.IN_STOCK
        assert mascara.minimum_order_quantity == 24
        assert mascara.meta['barcode'] == '9164035109868'

    def test_fills_defaults(self):
        importer = ProductImporter(client=client_for({'products': REMOTE_PRODUCTS[1:]}))

        importer.run()

        apple = Product.objects.get(sku='API-2')
        assert apple.brand == 'Unknown Brand'
        assert apple.availability_status == Product.AvailabilityStatus.OUT_OF_STOCK
        assert apple.warranty_information == '1 year warranty'
        assert apple.shipping_information == 'Ships in 1-2 business days'
        assert apple.minimum_order_quantity == 1
        assert apple.meta['barcode'] == 'API-2'

    def test_skips_existing(self):
        ProductImporter(client=client_for({'products': REMOTE_PRODUCTS})).run()

        result = ProductImporter(client=client_for({'products': REMOTE_PRODUCTS})).run()

        assert (result.imported, result.skipped) == (0, 2)
        assert Product.objects.count() == 2

    def test_http_error(self):
        importer = ProductImporter(client=client_for({'message': 'down'}, status_code=503))

        with pytest.raises(CatalogImportError):
            importer.run()
        assert Product.objects.count() == 0

    def test_malformed_payload(self):
        importer = ProductImporter(client=client_for(['not', 'a', 'dict']))

        with pytest.raises(CatalogImportError):
            importer.run()


@pytest.mark.django_db
class TestImportCommand:
    @pytest.fixture
    def remote(self, monkeypatch):
        state = {'payload': {'products': REMOTE_PRODUCTS}, 'status': 200}
        real_client = httpx.Client

        def handler(request):
            return httpx.Response(state['status'], json=state['payload'])

        monkeypatch.setattr(
            importer_module.httpx, 'Client',
            lambda **kwargs: real_client(transport=httpx.MockTransport(handler)),
        )
        return state

    def test_reports_imported_count(self, remote):
        out = StringIO()

        call_command('import_products', '--count', '2', stdout=out)

        assert 'Successfully imported 2 products' in out.getvalue()
        assert Product.objects.count() == 2

    def test_failure_raises_command_error(self, remote):
        remote['status'] = 500

        with pytest.raises(CommandError):
            call_command('import_products', stdout=StringIO())
