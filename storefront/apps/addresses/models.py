from django.conf import settings
from django.db import models


class Address(models.Model):
    """Shipping and billing details saved in a user's address book."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='addresses')
    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    company = models.CharField(max_length=255, blank=True, default='')
    address_1 = models.CharField(max_length=255)
    address_2 = models.CharField(max_length=255, blank=True, default='')
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=255)
    postal_code = models.CharField(max_length=20)
    country = models.CharField(max_length=255)
    phone = models.CharField(max_length=20, blank=True, default='')
    email = models.EmailField(max_length=255)
    additional_info = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'address_book_entry'
        ordering = ['id']
        verbose_name_plural = 'addresses'

    def __str__(self):
        return f"{self.first_name} {self.last_name}, {self.city}"
