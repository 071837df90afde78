from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    can_delete = False
    readonly_fields = ('product', 'product_title', 'quantity', 'price', 'total', 'notes')

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'total_amount', 'payment_method', 'status', 'created_at')
    list_filter = ('status', 'payment_method', 'created_at')
    search_fields = ('user__username', 'user__email', 'transaction_id')
    readonly_fields = (
        'user', 'total_amount', 'shipping_address', 'billing_address',
        'payment_method', 'transaction_id', 'notes', 'created_at', 'updated_at',
    )
    inlines = [OrderItemInline]
