from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Product
from .services.facets import CatalogFacets


@receiver(post_save, sender=Product)
@receiver(post_delete, sender=Product)
def invalidate_facets(sender, **kwargs):
    CatalogFacets().invalidate()
