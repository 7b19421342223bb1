"""
Общие утилиты, константы и логгер.
"""

from orders_api.common.logger import get_logger, log_info, log_error, log_warning, log_debug, setup_logging
from orders_api.common.constants import TypeMsg

__all__ = [
    "get_logger",
    "log_info",
    "log_error",
    "log_warning",
    "log_debug",
    "setup_logging",
    "TypeMsg",
]
