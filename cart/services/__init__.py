from .cart import add_item, cart_lines, clear_cart, get_cart, remove_item, update_item

__all__ = [
    "add_item",
    "cart_lines",
    "clear_cart",
    "get_cart",
    "remove_item",
    "update_item",
]
