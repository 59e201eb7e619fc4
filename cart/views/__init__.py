from .cart import CartItemDetailView, CartItemsView, CartSummaryView, CartView

__all__ = [
    "CartItemDetailView",
    "CartItemsView",
    "CartSummaryView",
    "CartView",
]
