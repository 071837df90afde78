from django.urls import path
from . import views

urlpatterns = [
    path('', views.CartView.as_view(), name='cart'),
    path('summary/', views.CartSummaryView.as_view(), name='cart-summary'),
    path('<int:line_id>/', views.CartLineView.as_view(), name='cart-line'),
]
