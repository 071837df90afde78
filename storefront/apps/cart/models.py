from django.conf import settings
from django.db import models


class CartLine(models.Model):
    """One user's chosen quantity of a product, with the price locked in when added."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='cart_lines')
    product = models.ForeignKey('catalog.Product', on_delete=models.CASCADE, related_name='cart_lines')
    quantity = models.PositiveIntegerField(default=1)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cart_line'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'product'], name='cart_line_unique_user_product'),
            models.CheckConstraint(condition=models.Q(quantity__gte=1), name='cart_line_quantity_positive'),
        ]

    def __str__(self):
        return f"{self.product_id} x{self.quantity} (user {self.user_id})"
