from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/products/', include('apps.catalog.urls')),
    path('api/cart/', include('apps.cart.urls')),
    path('api/addresses/', include('apps.addresses.urls')),
    path('api/orders/', include('apps.orders.urls')),
]
