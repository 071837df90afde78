import logging
from decimal import Decimal

import httpx
from django.conf import settings

from ..models import Product

logger = logging.getLogger(__name__)

DEFAULT_IMPORT_URL = 'https://dummyjson.com/products'
REQUEST_TIMEOUT_SECONDS = 15


class CatalogImportError(Exception):
    pass


class ImportResult:
    def __init__(self, fetched=0, imported=0, skipped=0):
        self.fetched = fetched
        self.imported = imported
        self.skipped = skipped


class ProductImporter:
    """Pulls products from a DummyJSON-style catalog API into the local catalog.

    Remote products are keyed by ``sku = "API-<remote id>"``; products already
    imported are skipped rather than updated.
    """

    def __init__(self, url=None, client=None):
        self.url = url or getattr(settings, 'STOREFRONT_PRODUCT_IMPORT_URL', DEFAULT_IMPORT_URL)
        self.client = client

    def fetch(self, count):
        client = self.client or httpx.Client(timeout=REQUEST_TIMEOUT_SECONDS)
        try:
            response = client.get(self.url, params={'limit': count})
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("IMPORT   | fetch failed from %s: %s", self.url, e)
            raise CatalogImportError("Failed to fetch products from API: {}".format(e)) from e
        finally:
            if self.client is None:
                client.close()

        products = payload.get('products') if isinstance(payload, dict) else None
        if not isinstance(products, list):
            raise CatalogImportError("Unexpected payload: 'products' list missing")
        return products

    def run(self, count=30):
        remote_products = self.fetch(count)
        result = ImportResult(fetched=len(remote_products))

        for remote in remote_products:
            sku = 'API-{}'.format(remote['id'])
            if Product.objects.filter(sku=sku).exists():
                result.skipped += 1
                continue
            Product.objects.create(**self.to_fields(remote, sku))
            result.imported += 1

        logger.info(
            "IMPORT   | fetched: %d | imported: %d | skipped: %d",
            result.fetched, result.imported, result.skipped,
        )
        return result

    def to_fields(self, remote, sku):
        stock = int(remote.get('stock') or 0)
        meta = remote.get('meta') or {}
        return {
            'title': remote['title'],
            'description': remote.get('description', ''),
            'category': remote.get('category') or '',
            'brand': remote.get('brand') or 'Unknown Brand',
            'sku': sku,
            'price': Decimal(str(remote['price'])),
            'discount_percentage': Decimal(str(remote.get('discountPercentage') or 0)),
            'rating': Decimal(str(remote['rating'])) if remote.get('rating') is not None else None,
            'stock': stock,
            'availability_status': (
                Product.AvailabilityStatus.IN_STOCK if stock > 0
                else Product.AvailabilityStatus.OUT_OF_STOCK
            ),
            'minimum_order_quantity': remote.get('minimumOrderQuantity') or 1,
            'weight': Decimal(str(remote['weight'])) if remote.get('weight') is not None else None,
            'dimensions': remote.get('dimensions') or {},
            'warranty_information': remote.get('warrantyInformation') or '1 year warranty',
            'shipping_information': remote.get('shippingInformation') or 'Ships in 1-2 business days',
            'return_policy': remote.get('returnPolicy') or '30 days return policy',
            'tags': remote.get('tags') or [],
            'reviews': remote.get('reviews') or [],
            'meta': {
                'barcode': meta.get('barcode') or sku,
                'qrCode': meta.get('qrCode'),
            },
            'thumbnail': remote.get('thumbnail') or '',
            'images': remote.get('images') or [],
        }
