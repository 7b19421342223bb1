# orders_api/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


# Имя корневого логгера приложения
ROOT_LOGGER_NAME = "orders_api"

# Таблица заказов в PostgreSQL
ORDERS_TABLE = "orders"

# Ключ advisory lock для применения схемы
SCHEMA_LOCK_ID = 724031955
