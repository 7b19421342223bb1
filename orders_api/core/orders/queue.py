# orders_api/core/orders/queue.py
"""
In-memory очередь заказов (FIFO).

Живёт в памяти процесса: создаётся пустой при старте приложения,
не сохраняется и теряется при остановке. Все операции выполняются
под одним мьютексом и не делают I/O.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Optional

from orders_api.common.logger import get_logger
from orders_api.core.orders.models import OrderSummary

logger = get_logger("orders_api.queue")


class OrderQueue:
    """
    Неограниченная FIFO-очередь проекций заказов.

    Голова очереди слева, хвост справа. Извлечённый элемент
    обратно в очередь не возвращается.
    """

    def __init__(self) -> None:
        self._items: Deque[OrderSummary] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.size()

    def enqueue(self, summary: OrderSummary) -> None:
        """Добавляет заказ в хвост очереди. Всегда успешно."""
        with self._lock:
            self._items.append(summary)
            size = len(self._items)
        logger.info(f"Заказ ID {summary.id} добавлен в очередь. Всего заказов: {size}")

    def dequeue(self) -> Optional[OrderSummary]:
        """
        Извлекает заказ из головы очереди.

        Returns:
            Первый заказ или None, если очередь пуста
        """
        with self._lock:
            if not self._items:
                summary, size = None, 0
            else:
                summary = self._items.popleft()
                size = len(self._items)

        if summary is None:
            logger.info("Очередь заказов пуста")
        else:
            logger.info(f"Заказ ID {summary.id} извлечён из очереди. Осталось: {size}")
        return summary

    def peek(self) -> Optional[OrderSummary]:
        """
        Возвращает заказ из головы очереди, не извлекая его.

        Returns:
            Первый заказ или None, если очередь пуста
        """
        with self._lock:
            summary = self._items[0] if self._items else None

        if summary is None:
            logger.info("Очередь заказов пуста")
        else:
            logger.info(f"Следующий заказ в очереди: ID {summary.id}")
        return summary

    def size(self) -> int:
        """Текущее количество заказов в очереди."""
        with self._lock:
            return len(self._items)

    def is_empty(self) -> bool:
        return self.size() == 0

    def snapshot(self) -> list[OrderSummary]:
        """Копия очереди от головы к хвосту; сама очередь не меняется."""
        with self._lock:
            items = list(self._items)
        logger.info(f"Получение всех заказов из очереди. Всего: {len(items)}")
        return items
