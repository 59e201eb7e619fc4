from .pricing import discount_percent, effective_price, sale_price_for_percent

__all__ = [
    "discount_percent",
    "effective_price",
    "sale_price_for_percent",
]
