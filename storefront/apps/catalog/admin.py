from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        'title', 'category', 'brand', 'price', 'discount_percentage',
        'stock', 'availability_status', 'rating', 'sku',
    )
    list_filter = ('category', 'brand', 'availability_status')
    search_fields = ('title', 'sku', 'brand')
    readonly_fields = ('created_at', 'updated_at')
