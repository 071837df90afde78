from django.contrib import admin
from .models import Address


@admin.register(Address)
class AddressAdmin(admin.ModelAdmin):
    list_display = ('user', 'first_name', 'last_name', 'city', 'country', 'email')
    list_filter = ('country',)
    search_fields = ('first_name', 'last_name', 'email', 'user__username')
    raw_id_fields = ('user',)
