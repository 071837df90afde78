from django.contrib import admin
from .models import CartLine


@admin.register(CartLine)
class CartLineAdmin(admin.ModelAdmin):
    list_display = ('user', 'product', 'quantity', 'price', 'updated_at')
    search_fields = ('user__username', 'product__title')
    raw_id_fields = ('user', 'product')
