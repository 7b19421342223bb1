# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

# Устанавливаем переменные окружения перед импортом модулей
os.environ.setdefault("DB_PASSWORD", "test_password")

from orders_api.core.orders.models import Order, OrderCreateDTO, OrderSummary


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Мок конфигурации для тестов."""
    return {
        "_comment_test": "ignored",
        "PROJECT_NAME": "orders_api_test",
        "VERSION": "1.0.0-test",
        "DEBUG": True,
        "ENVIRONMENT": "test",
        "ORDERS_SERVICE_HOST": "127.0.0.1",
        "ORDERS_SERVICE_PORT": 9090,
        "LOG_LEVEL": "DEBUG",
        "LOG_TO_FILE": False,
        "LOG_FILE_PATH": "logs/test.log",
        "LOG_FORMAT": "json",
        "LOG_MAX_BYTES": 1024,
        "LOG_BACKUP_COUNT": 2,
        "DB_HOST": "db.local",
        "DB_PORT": 5433,
        "DB_NAME": "orders_test",
        "DB_USER": "tester",
        "DB_PASSWORD": "secret",
        "DB_MIN_POOL_SIZE": 1,
        "DB_MAX_POOL_SIZE": 3,
        "DB_COMMAND_TIMEOUT": 30,
        "DB_RETRY_ATTEMPTS": 2,
        "DB_RETRY_DELAY": 0.5,
    }


# =============================================================================
# ФИКСТУРЫ ИНФРАСТРУКТУРЫ (МОКИ)
# =============================================================================

@pytest.fixture
def mock_conn() -> MagicMock:
    """Мок соединения внутри транзакции."""
    conn = MagicMock()
    conn.fetchrow = AsyncMock(return_value=None)
    conn.execute = AsyncMock(return_value="INSERT 0 1")
    return conn


@pytest.fixture
def mock_db(mock_conn: MagicMock) -> MagicMock:
    """Мок DatabaseManager: fetch-методы и transaction()."""
    db = MagicMock()
    db.fetchrow = AsyncMock(return_value=None)
    db.fetch = AsyncMock(return_value=[])
    db.execute = AsyncMock(return_value="INSERT 0 1")
    db.fetchval = AsyncMock(return_value=None)

    @asynccontextmanager
    async def _transaction():
        yield mock_conn

    db.transaction = MagicMock(side_effect=_transaction)
    return db


# =============================================================================
# ФИКСТУРЫ МОДЕЛЕЙ
# =============================================================================

@pytest.fixture
def sample_order_row() -> dict[str, Any]:
    """Строка заказа в том виде, как её возвращает БД."""
    return {
        "id": 1,
        "customer_name": "Alice",
        "description": "Two pizzas",
        "value": Decimal("59.90"),
        "created_at": datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc),
    }


@pytest.fixture
def make_summary() -> Callable[[int], OrderSummary]:
    """Фабрика проекций заказа с уникальным ID."""
    base = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

    def _make(order_id: int) -> OrderSummary:
        return OrderSummary(
            id=order_id,
            customer_name=f"Customer {order_id}",
            description=f"Order #{order_id}",
            value=Decimal("10.00") * order_id,
            created_at=base + timedelta(seconds=order_id),
        )

    return _make


class InMemoryOrderRepository:
    """
    Хранилище заказов в памяти для тестов сервиса.
    Как и PostgreSQL, назначает последовательные ID и возрастающее время.
    """

    def __init__(self) -> None:
        self.orders: dict[int, Order] = {}
        self.saved: list[OrderCreateDTO] = []
        self._next_id = 1
        self._clock = datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)

    async def save(self, data: OrderCreateDTO) -> Order:
        self.saved.append(data)
        order = Order(
            id=self._next_id,
            customer_name=data.customer_name,
            description=data.description,
            value=data.value,
            created_at=self._clock,
        )
        self.orders[order.id] = order
        self._next_id += 1
        self._clock += timedelta(minutes=1)
        return order

    async def find_by_id(self, order_id: int) -> Order | None:
        return self.orders.get(order_id)

    async def list_all_by_created_desc(self) -> list[Order]:
        return sorted(self.orders.values(), key=lambda o: (o.created_at, o.id), reverse=True)


@pytest.fixture
def memory_repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()
