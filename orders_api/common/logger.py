# orders_api/common/logger.py
"""
Модуль структурированного логирования.
Поддерживает JSON и цветной текстовый формат, ротацию файлов
и отдельный файл для ошибок.
"""

from __future__ import annotations

import inspect
import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from orders_api.common.constants import ROOT_LOGGER_NAME, TypeMsg


# Общие файловые хендлеры (один набор на процесс)
_GLOBAL_FILE_HANDLER: logging.Handler | None = None
_GLOBAL_ERROR_HANDLER: logging.Handler | None = None

_LOGGING_INITIALIZED: bool = False

_loggers: dict[str, logging.Logger] = {}

_LEVELS: dict[TypeMsg, int] = {
    TypeMsg.DEBUG: logging.DEBUG,
    TypeMsg.INFO: logging.INFO,
    TypeMsg.WARNING: logging.WARNING,
    TypeMsg.ERROR: logging.ERROR,
    TypeMsg.CRITICAL: logging.CRITICAL,
}


# =============================================================================
# ФОРМАТТЕРЫ
# =============================================================================

class JsonFormatter(logging.Formatter):
    """Форматтер для JSON логов."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if getattr(record, "extra_data", None):
            log_data["extra"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Цветной форматтер для консоли (разработка)."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"
    GRAY = "\033[90m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.GRAY)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        caller_info = ""
        extra_data = getattr(record, "extra_data", None) or {}
        caller_func = extra_data.get("caller_function")
        if caller_func:
            caller_info = (
                f" {self.GRAY}[{extra_data.get('caller_module')}.{caller_func}() "
                f"{extra_data.get('caller_file')}:{extra_data.get('caller_line')}]{self.RESET}"
            )

        message = f"{timestamp} {color}[{record.levelname}]{self.RESET}{caller_info} {record.getMessage()}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


# =============================================================================
# НАСТРОЙКИ ЛОГГЕРА
# =============================================================================

@dataclass
class _LogOptions:
    level: str = "DEBUG"
    fmt: str = "colored"
    to_file: bool = False
    file_path: str = "logs/orders_api.log"
    max_bytes: int = 10485760
    backup_count: int = 5


def _load_options() -> _LogOptions:
    """
    Читает параметры логирования из конфигурации.
    При недоступной конфигурации (или моках в тестах) возвращает значения по умолчанию.
    """
    options = _LogOptions()
    try:
        from orders_api.config import settings
        cfg = settings.logging
    except Exception:
        return options

    if isinstance(cfg.LOG_LEVEL, str):
        options.level = cfg.LOG_LEVEL
    if isinstance(cfg.LOG_FORMAT, str):
        options.fmt = cfg.LOG_FORMAT
    if isinstance(cfg.LOG_TO_FILE, bool):
        options.to_file = cfg.LOG_TO_FILE
    if isinstance(cfg.LOG_FILE_PATH, str):
        options.file_path = cfg.LOG_FILE_PATH
    if isinstance(cfg.LOG_MAX_BYTES, int):
        options.max_bytes = cfg.LOG_MAX_BYTES
    if isinstance(cfg.LOG_BACKUP_COUNT, int):
        options.backup_count = cfg.LOG_BACKUP_COUNT
    return options


def _make_formatter(fmt: str) -> logging.Formatter:
    return JsonFormatter() if fmt == "json" else ColoredFormatter()


def _file_handlers(options: _LogOptions) -> list[logging.Handler]:
    """Создаёт (однократно) общий файловый хендлер и хендлер ошибок."""
    global _GLOBAL_FILE_HANDLER, _GLOBAL_ERROR_HANDLER

    log_path = Path(options.file_path)
    log_dir = log_path.parent
    log_dir.mkdir(parents=True, exist_ok=True)

    if _GLOBAL_FILE_HANDLER is None:
        log_name = log_path.stem
        # SERVICE_NAME разделяет логи нескольких процессов в одной директории
        service_name = os.getenv("SERVICE_NAME")
        if service_name:
            log_name = f"{log_name}_{service_name}"

        _GLOBAL_FILE_HANDLER = RotatingFileHandler(
            log_dir / f"{log_name}.log",
            maxBytes=options.max_bytes,
            backupCount=options.backup_count,
            encoding="utf-8",
        )
        _GLOBAL_FILE_HANDLER.setFormatter(_make_formatter(options.fmt))

    if _GLOBAL_ERROR_HANDLER is None:
        _GLOBAL_ERROR_HANDLER = RotatingFileHandler(
            log_dir / "error.log",
            maxBytes=options.max_bytes,
            backupCount=options.backup_count,
            encoding="utf-8",
        )
        _GLOBAL_ERROR_HANDLER.setLevel(logging.ERROR)
        _GLOBAL_ERROR_HANDLER.setFormatter(_make_formatter(options.fmt))

    return [_GLOBAL_FILE_HANDLER, _GLOBAL_ERROR_HANDLER]


def setup_logging() -> None:
    """
    Инициализирует систему логирования.
    Идемпотентна: повторные вызовы ничего не делают.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED:
        return
    _LOGGING_INITIALIZED = True

    get_logger(ROOT_LOGGER_NAME)

    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Возвращает настроенный логгер.
    Логгеры кэшируются по имени, хендлеры не дублируются.

    Args:
        name: Имя логгера

    Returns:
        Настроенный логгер
    """
    if name in _loggers:
        return _loggers[name]

    options = _load_options()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, options.level.upper(), logging.DEBUG))

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(_make_formatter(options.fmt))
        logger.addHandler(console_handler)

        if options.to_file:
            for handler in _file_handlers(options):
                logger.addHandler(handler)

    logger.propagate = False

    _loggers[name] = logger
    return logger


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ ЛОГИРОВАНИЯ
# =============================================================================

def _get_caller_info(depth: int = 2) -> dict[str, Any]:
    """
    Возвращает сведения о коде, вызвавшем функцию логирования.

    Args:
        depth: Сколько кадров стека пропустить над текущей функцией
    """
    frame = inspect.currentframe()
    try:
        caller_frame = frame
        for _ in range(depth):
            if caller_frame is None:
                break
            caller_frame = caller_frame.f_back

        if caller_frame is None:
            return {}

        module = inspect.getmodule(caller_frame)
        return {
            "caller_function": caller_frame.f_code.co_name,
            "caller_module": module.__name__ if module else "unknown",
            "caller_file": Path(caller_frame.f_code.co_filename).name,
            "caller_line": caller_frame.f_lineno,
        }
    finally:
        # Разрываем ссылочный цикл на кадры стека
        del frame


def _emit(
    level: int,
    message: str,
    logger_name: str,
    extra: dict[str, Any] | None,
    exc_info: bool = False,
) -> None:
    # _emit <- публичная функция <- вызывающий код
    caller_info = _get_caller_info(depth=3)
    record_extra = {"extra_data": {**caller_info, **(extra or {})}}
    get_logger(logger_name).log(level, message, extra=record_extra, exc_info=exc_info)


async def log_info(
    message: str,
    *,
    type_msg: TypeMsg = TypeMsg.INFO,
    logger_name: str = ROOT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
) -> None:
    """
    Асинхронное логирование с уровнем, заданным через type_msg.

    Args:
        message: Сообщение
        type_msg: Уровень сообщения
        logger_name: Имя логгера
        extra: Дополнительные данные
    """
    _emit(_LEVELS.get(TypeMsg(type_msg), logging.INFO), message, logger_name, extra)


async def log_debug(
    message: str,
    logger_name: str = ROOT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
) -> None:
    """Логирование DEBUG уровня."""
    _emit(logging.DEBUG, message, logger_name, extra)


async def log_warning(
    message: str,
    logger_name: str = ROOT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
) -> None:
    """Логирование WARNING уровня."""
    _emit(logging.WARNING, message, logger_name, extra)


async def log_error(
    message: str,
    logger_name: str = ROOT_LOGGER_NAME,
    extra: dict[str, Any] | None = None,
    exc_info: bool = False,
) -> None:
    """
    Логирование ERROR уровня.

    Args:
        message: Сообщение об ошибке
        logger_name: Имя логгера
        extra: Дополнительные данные
        exc_info: Включать ли трейсбек текущего исключения
    """
    _emit(logging.ERROR, message, logger_name, extra, exc_info=exc_info)
