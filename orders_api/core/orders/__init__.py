"""
Домен заказов.
Модели, хранилище, очередь и сервис.
"""

from orders_api.core.orders.exceptions import OrderError, OrderNotFoundError
from orders_api.core.orders.models import Order, OrderCreateDTO, OrderSummary, QueueStatusDTO
from orders_api.core.orders.queue import OrderQueue
from orders_api.core.orders.repository import OrderRepository
from orders_api.core.orders.service import OrderService

__all__ = [
    "Order",
    "OrderCreateDTO",
    "OrderSummary",
    "QueueStatusDTO",
    "OrderQueue",
    "OrderRepository",
    "OrderService",
    "OrderError",
    "OrderNotFoundError",
]
