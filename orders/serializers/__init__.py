from .checkout import (
    CheckoutSerializer,
    OrderDeliverySerializer,
    OrderLookupSerializer,
    OrderNotifySerializer,
    OrderStatusUpdateSerializer,
    WarrantySerializer,
)
from .order import OrderItemSerializer, OrderSerializer

__all__ = [
    "CheckoutSerializer",
    "OrderDeliverySerializer",
    "OrderItemSerializer",
    "OrderLookupSerializer",
    "OrderNotifySerializer",
    "OrderSerializer",
    "OrderStatusUpdateSerializer",
    "WarrantySerializer",
]
