from .checkout import place_order
from .exceptions import InsufficientStockError, OrderNotFoundError
from .totals import compute_totals, price_lines

__all__ = [
    "InsufficientStockError",
    "OrderNotFoundError",
    "compute_totals",
    "place_order",
    "price_lines",
]
