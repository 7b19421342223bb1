"""
Инфраструктурный слой.
Работа с PostgreSQL.
"""

from orders_api.infra.database import DatabaseManager, get_db, init_db, close_db

__all__ = [
    "DatabaseManager",
    "get_db",
    "init_db",
    "close_db",
]
