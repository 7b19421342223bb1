# orders_api/infra/database.py
"""
Менеджер базы данных PostgreSQL.
Пул соединений asyncpg, автоматический retry и явные транзакции.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from functools import wraps
from typing import Any, AsyncGenerator, Callable, TypeVar

import asyncpg
from asyncpg import Connection, Pool, Record

from orders_api.common.constants import SCHEMA_LOCK_ID, TypeMsg
from orders_api.common.logger import log_error, log_info, log_warning

T = TypeVar("T")

# Ошибки, после которых запрос имеет смысл повторить
CONNECTION_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresConnectionError,
    asyncpg.InterfaceError,
    ConnectionRefusedError,
    OSError,
)


def _retry_defaults() -> tuple[int, float]:
    from orders_api.config import settings
    return settings.database.DB_RETRY_ATTEMPTS, settings.database.DB_RETRY_DELAY


def retry_on_connection_error(
    max_attempts: int | None = None,
    delay: float | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Декоратор для повтора корутины при ошибках подключения.
    Остальные исключения пробрасываются сразу.

    Args:
        max_attempts: Количество попыток (по умолчанию DB_RETRY_ATTEMPTS)
        delay: Базовая задержка в секундах, растёт линейно с номером попытки
               (по умолчанию DB_RETRY_DELAY)
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            attempts, base_delay = max_attempts, delay
            if attempts is None or base_delay is None:
                default_attempts, default_delay = _retry_defaults()
                attempts = default_attempts if attempts is None else attempts
                base_delay = default_delay if base_delay is None else base_delay

            for attempt in range(1, attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except CONNECTION_ERRORS as e:
                    if attempt >= attempts:
                        await log_error(f"Не удалось выполнить {func.__name__} после {attempts} попыток: {e}")
                        raise
                    await log_warning(f"Ошибка подключения к БД (попытка {attempt}/{attempts}): {e}")
                    await asyncio.sleep(base_delay * attempt)

            raise RuntimeError("max_attempts должен быть >= 1")

        return wrapper  # type: ignore

    return decorator


class DatabaseManager:
    """
    Менеджер подключений к PostgreSQL.
    Singleton: все репозитории работают через один пул.
    """

    _instance: DatabaseManager | None = None
    _pool: Pool | None = None

    def __new__(cls) -> DatabaseManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._pool = None

    @property
    def pool(self) -> Pool:
        """Возвращает пул соединений."""
        if self._pool is None:
            raise RuntimeError("Пул соединений не инициализирован. Вызовите connect() сначала.")
        return self._pool

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    @retry_on_connection_error()
    async def connect(
        self,
        dsn: str | None = None,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: int | None = None,
    ) -> None:
        """
        Создаёт пул соединений.
        Незаданные параметры берутся из настроек database.

        Args:
            dsn: DSN строка подключения
            min_size: Минимальный размер пула
            max_size: Максимальный размер пула
            command_timeout: Таймаут команд (секунды)
        """
        if self._pool is not None:
            return

        from orders_api.config import settings
        db_settings = settings.database

        await log_info("Подключение к PostgreSQL...", type_msg=TypeMsg.INFO)

        self._pool = await asyncpg.create_pool(
            dsn=dsn or db_settings.dsn,
            min_size=min_size if min_size is not None else db_settings.DB_MIN_POOL_SIZE,
            max_size=max_size if max_size is not None else db_settings.DB_MAX_POOL_SIZE,
            command_timeout=command_timeout if command_timeout is not None else db_settings.DB_COMMAND_TIMEOUT,
        )

        await log_info("Подключение к PostgreSQL установлено", type_msg=TypeMsg.INFO)

    async def disconnect(self) -> None:
        """Закрывает пул соединений."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            await log_info("Соединение с PostgreSQL закрыто", type_msg=TypeMsg.INFO)

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[Connection, None]:
        """
        Контекстный менеджер для получения соединения из пула.

        Example:
            async with db.acquire() as conn:
                rows = await conn.fetch("SELECT * FROM orders")
        """
        async with self.pool.acquire() as connection:
            yield connection

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[Connection, None]:
        """
        Единица работы в новой транзакции.
        Commit при успешном выходе из блока, rollback при любом исключении.

        Example:
            async with db.transaction() as conn:
                row = await conn.fetchrow("INSERT INTO orders ... RETURNING *")
        """
        async with self.pool.acquire() as connection:
            async with connection.transaction():
                yield connection

    @retry_on_connection_error()
    async def execute(self, query: str, *args: Any) -> str:
        """Выполняет SQL без возврата данных и возвращает статус команды."""
        async with self.acquire() as conn:
            return await conn.execute(query, *args)

    @retry_on_connection_error()
    async def fetch(self, query: str, *args: Any) -> list[Record]:
        """Выполняет SQL и возвращает все строки."""
        async with self.acquire() as conn:
            return await conn.fetch(query, *args)

    @retry_on_connection_error()
    async def fetchrow(self, query: str, *args: Any) -> Record | None:
        """Выполняет SQL и возвращает одну строку или None."""
        async with self.acquire() as conn:
            return await conn.fetchrow(query, *args)

    @retry_on_connection_error()
    async def fetchval(self, query: str, *args: Any, column: int = 0) -> Any:
        """Выполняет SQL и возвращает одно значение."""
        async with self.acquire() as conn:
            return await conn.fetchval(query, *args, column=column)

    async def health_check(self) -> bool:
        """
        Проверяет доступность БД.

        Returns:
            True если SELECT 1 выполнился
        """
        if self._pool is None:
            return False
        try:
            return await self.fetchval("SELECT 1") == 1
        except Exception as e:
            await log_error(f"Health check PostgreSQL failed: {e}")
            return False


_db_manager: DatabaseManager | None = None


def get_db() -> DatabaseManager:
    """Возвращает глобальный экземпляр DatabaseManager."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


async def init_db() -> DatabaseManager:
    """
    Подключается к базе данных и применяет схему.

    Returns:
        Подключённый DatabaseManager
    """
    from orders_api.config import settings

    db = get_db()
    await db.connect()
    await log_info(
        f"PostgreSQL подключён: {settings.database.DB_HOST}:{settings.database.DB_PORT}/{settings.database.DB_NAME}",
        type_msg=TypeMsg.INFO,
    )

    await _init_schema(db)
    return db


async def _init_schema(db: DatabaseManager) -> None:
    """Применяет migrations/init.sql под advisory lock."""
    from orders_api.config.loader import get_project_root

    schema_path = get_project_root() / "migrations" / "init.sql"
    if not schema_path.exists():
        await log_warning(f"Файл схемы БД не найден: {schema_path}")
        return

    schema_sql = schema_path.read_text(encoding="utf-8")

    await log_info("Применение схемы БД...", type_msg=TypeMsg.INFO)
    try:
        # Блокировка снимается при завершении транзакции
        async with db.transaction() as conn:
            await conn.execute("SELECT pg_advisory_xact_lock($1)", SCHEMA_LOCK_ID)
            await conn.execute(schema_sql)
    except Exception as e:
        await log_error(f"Ошибка при инициализации схемы БД: {e}")
        raise

    await log_info("Схема БД успешно применена", type_msg=TypeMsg.INFO)


async def close_db() -> None:
    """Закрывает подключение к базе данных."""
    await get_db().disconnect()
