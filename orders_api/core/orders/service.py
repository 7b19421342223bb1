# orders_api/core/orders/service.py
"""
Сервис для работы с заказами.
Создание, чтение и очередь заказов на обработку.
"""

from __future__ import annotations

from typing import Optional

from orders_api.common.constants import TypeMsg
from orders_api.common.logger import log_debug, log_info, log_warning
from orders_api.core.orders.exceptions import OrderNotFoundError
from orders_api.core.orders.models import Order, OrderCreateDTO, OrderSummary, QueueStatusDTO
from orders_api.core.orders.queue import OrderQueue
from orders_api.core.orders.repository import OrderRepository


class OrderService:
    """
    Сервис заказов.

    Сохранение заказа и постановка в очередь не связаны транзакцией:
    в очередь попадает только уже закоммиченный заказ.
    """

    def __init__(self, repository: OrderRepository, queue: OrderQueue) -> None:
        """
        Args:
            repository: Хранилище заказов
            queue: Очередь заказов на обработку
        """
        self._repo = repository
        self._queue = queue

    # =========================================================================
    # CRUD ОПЕРАЦИИ
    # =========================================================================

    async def create_order(self, data: OrderCreateDTO) -> OrderSummary:
        """
        Создаёт заказ и ставит его в очередь.

        Args:
            data: Данные заказа от клиента

        Returns:
            Проекция созданного заказа
        """
        await log_info(f"Создание нового заказа для клиента: {data.customer_name}", type_msg=TypeMsg.INFO)

        normalized = await self._validate_order_data(data)
        order = await self._repo.save(normalized)

        await log_info(f"Заказ успешно создан. ID: {order.id}", type_msg=TypeMsg.INFO)

        summary = OrderSummary.from_order(order)
        self._queue.enqueue(summary)

        return summary

    async def list_orders(self) -> list[OrderSummary]:
        """Возвращает все заказы, новые первыми."""
        await log_info("Получение списка всех заказов", type_msg=TypeMsg.INFO)

        orders = await self._repo.list_all_by_created_desc()

        await log_info(f"Найдено заказов: {len(orders)}", type_msg=TypeMsg.INFO)

        return [OrderSummary.from_order(order) for order in orders]

    async def get_order(self, order_id: int) -> OrderSummary:
        """
        Получает заказ по ID.

        Raises:
            OrderNotFoundError: заказа с таким ID нет
        """
        await log_info(f"Поиск заказа с ID: {order_id}", type_msg=TypeMsg.INFO)

        order: Optional[Order] = await self._repo.find_by_id(order_id)
        if order is None:
            await log_warning(f"Заказ не найден, ID: {order_id}")
            raise OrderNotFoundError(order_id)

        return OrderSummary.from_order(order)

    async def _validate_order_data(self, data: OrderCreateDTO) -> OrderCreateDTO:
        """Обрезает пробелы в имени клиента и описании; None остаётся None."""
        await log_debug(f"Проверка данных заказа для клиента: {data.customer_name}")

        return data.model_copy(
            update={
                "customer_name": data.customer_name.strip() if data.customer_name is not None else None,
                "description": data.description.strip() if data.description is not None else None,
            }
        )

    # =========================================================================
    # ОЧЕРЕДЬ
    # =========================================================================

    def process_next_order(self) -> Optional[OrderSummary]:
        """Извлекает следующий заказ из очереди (None, если пусто)."""
        return self._queue.dequeue()

    def peek_next_order(self) -> Optional[OrderSummary]:
        """Следующий заказ без извлечения (None, если пусто)."""
        return self._queue.peek()

    def queue_size(self) -> int:
        return self._queue.size()

    def is_queue_empty(self) -> bool:
        return self._queue.is_empty()

    def queue_snapshot(self) -> list[OrderSummary]:
        """Все заказы в очереди от первого к последнему."""
        return self._queue.snapshot()

    def queue_status(self) -> QueueStatusDTO:
        """Размер, признак пустоты и содержимое очереди одним снимком."""
        orders = self._queue.snapshot()
        return QueueStatusDTO(size=len(orders), is_empty=not orders, orders=orders)
