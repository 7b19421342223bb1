# orders_api/core/orders/repository.py
"""
Репозиторий для работы с заказами в БД.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from orders_api.common.constants import ORDERS_TABLE, TypeMsg
from orders_api.common.logger import log_error, log_info
from orders_api.core.orders.models import Order, OrderCreateDTO
from orders_api.infra.database import DatabaseManager

_COLUMNS = "id, customer_name, description, value, created_at"


class OrderRepository:
    """
    Хранилище заказов.
    ID и время создания назначает PostgreSQL (BIGSERIAL и DEFAULT NOW()).
    """

    def __init__(self, db: DatabaseManager) -> None:
        """
        Args:
            db: Менеджер базы данных (Dependency Injection)
        """
        self._db = db

    async def save(self, data: OrderCreateDTO) -> Order:
        """
        Сохраняет новый заказ в отдельной транзакции.

        Args:
            data: Нормализованные данные заказа

        Returns:
            Сохранённый заказ с назначенными id и created_at

        Raises:
            Exception: ошибка БД пробрасывается после rollback
        """
        try:
            async with self._db.transaction() as conn:
                row = await conn.fetchrow(
                    f"""
                    INSERT INTO {ORDERS_TABLE} (customer_name, description, value)
                    VALUES ($1, $2, $3)
                    RETURNING {_COLUMNS}
                    """,
                    data.customer_name,
                    data.description,
                    data.value,
                )
        except Exception as e:
            await log_error(f"Ошибка создания заказа: {e}")
            raise

        order = self._row_to_order(row)
        await log_info(f"Заказ {order.id} записан в БД", type_msg=TypeMsg.DEBUG)
        return order

    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Получает заказ по ID.

        Returns:
            Заказ или None, если его нет
        """
        try:
            row = await self._db.fetchrow(
                f"SELECT {_COLUMNS} FROM {ORDERS_TABLE} WHERE id = $1",
                order_id,
            )
        except Exception as e:
            await log_error(f"Ошибка получения заказа {order_id}: {e}")
            raise

        if row is None:
            return None
        return self._row_to_order(row)

    async def list_all_by_created_desc(self) -> list[Order]:
        """
        Возвращает все заказы, новые первыми.
        При равном created_at первым идёт больший id.
        """
        try:
            rows = await self._db.fetch(
                f"""
                SELECT {_COLUMNS}
                FROM {ORDERS_TABLE}
                ORDER BY created_at DESC, id DESC
                """
            )
        except Exception as e:
            await log_error(f"Ошибка получения списка заказов: {e}")
            raise

        return [self._row_to_order(row) for row in rows]

    def _row_to_order(self, row: Mapping[str, Any]) -> Order:
        """Конвертирует строку БД в модель Order."""
        return Order(
            id=row["id"],
            customer_name=row["customer_name"],
            description=row["description"],
            value=row["value"],
            created_at=row["created_at"],
        )
