from .order import Order, OrderItem, generate_order_number

__all__ = [
    "Order",
    "OrderItem",
    "generate_order_number",
]
