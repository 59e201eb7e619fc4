# cart/urls.py

from django.urls import path

from cart.views import CartItemDetailView, CartItemsView, CartSummaryView, CartView

urlpatterns = [
    path("", CartView.as_view(), name="cart"),
    path("items/", CartItemsView.as_view(), name="cart-items"),
    path("items/<uuid:item_id>/", CartItemDetailView.as_view(), name="cart-item-detail"),
    path("summary/", CartSummaryView.as_view(), name="cart-summary"),
]
