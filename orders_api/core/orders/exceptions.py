# orders_api/core/orders/exceptions.py
"""
Исключения домена заказов.
"""


class OrderError(Exception):
    """Базовая ошибка домена заказов."""
    pass


class OrderNotFoundError(OrderError):
    """Заказ с указанным ID отсутствует в хранилище."""

    def __init__(self, order_id: int) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found with ID: {order_id}")
