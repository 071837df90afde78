from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.common.money import to_money


class Product(models.Model):
    """Products available in the storefront catalog."""

    class AvailabilityStatus(models.TextChoices):
        IN_STOCK = 'In Stock', 'In Stock'
        OUT_OF_STOCK = 'Out of Stock', 'Out of Stock'
        LOW_STOCK = 'Low Stock', 'Low Stock'
        PREORDER = 'Preorder', 'Preorder'
        DISCONTINUED = 'Discontinued', 'Discontinued'

    title = models.CharField(max_length=255)
    description = models.TextField()
    category = models.CharField(max_length=255, blank=True, default='')
    brand = models.CharField(max_length=255, blank=True, default='')
    sku = models.CharField(max_length=100, unique=True, null=True, blank=True)
    price = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
    )
    discount_percentage = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
    )
    rating = models.DecimalField(
        max_digits=3, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('5'))],
    )
    stock = models.PositiveIntegerField(default=0)
    availability_status = models.CharField(
        max_length=20, choices=AvailabilityStatus.choices, default=AvailabilityStatus.IN_STOCK,
    )
    minimum_order_quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    # Descriptive metadata, not interpreted by the cart or checkout
    weight = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    dimensions = models.JSONField(default=dict, blank=True)
    warranty_information = models.CharField(max_length=500, blank=True, default='')
    shipping_information = models.CharField(max_length=500, blank=True, default='')
    return_policy = models.CharField(max_length=500, blank=True, default='')
    tags = models.JSONField(default=list, blank=True)
    reviews = models.JSONField(default=list, blank=True)
    meta = models.JSONField(default=dict, blank=True)
    thumbnail = models.URLField(max_length=255, blank=True, default='')
    images = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'catalog_product'
        ordering = ['id']
        indexes = [
            models.Index(fields=['category'], name='catalog_product_category_idx'),
            models.Index(fields=['brand'], name='catalog_product_brand_idx'),
            models.Index(fields=['availability_status'], name='catalog_product_status_idx'),
        ]

    def __str__(self):
        return self.title

    @property
    def discounted_price(self):
        discount = self.discount_percentage or Decimal('0')
        return to_money(self.price * (Decimal('100') - discount) / Decimal('100'))
