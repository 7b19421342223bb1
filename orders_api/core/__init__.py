"""
Доменный слой (Core Domain).
"""

from orders_api.core.orders import Order, OrderQueue, OrderService

__all__ = [
    "Order",
    "OrderQueue",
    "OrderService",
]
