import logging

from django.conf import settings
from django.core.cache import cache

from ..models import Product

logger = logging.getLogger(__name__)


class CatalogFacets:
    """Distinct filter values for the product listing, cached between writes."""

    CACHE_KEY = 'catalog_facets_v1'

    def __init__(self):
        self.ttl = getattr(settings, 'STOREFRONT_FACETS_CACHE_TTL', 3600)

    def get_facets(self):
        """Return cached facets or build fresh ones."""
        cached = cache.get(self.CACHE_KEY)
        if cached:
            logger.debug("FACETS   | loaded from cache")
            return cached
        logger.info("FACETS   | cache miss, building from catalog")
        facets = self._build_facets()
        cache.set(self.CACHE_KEY, facets, self.ttl)
        return facets

    def invalidate(self):
        cache.delete(self.CACHE_KEY)

    def _build_facets(self):
        return {
            'categories': self._distinct(Product, 'category'),
            'brands': self._distinct(Product, 'brand'),
            'availability_statuses': [
                {'value': value, 'label': label}
                for value, label in Product.AvailabilityStatus.choices
            ],
        }

    def _distinct(self, model, field):
        values = (
            model.objects
            .exclude(**{field: ''})
            .order_by(field)
            .values_list(field, flat=True)
            .distinct()
        )
        return list(values)
