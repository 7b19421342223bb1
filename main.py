#!/usr/bin/env python3
# main.py
"""
Точка входа Orders Service.
Поднимает HTTP API заказов через uvicorn.
SIGINT/SIGTERM обрабатывает сам uvicorn (graceful shutdown).
"""

from __future__ import annotations

import asyncio

import uvicorn

from orders_api.common.constants import TypeMsg
from orders_api.common.logger import log_info, setup_logging
from orders_api.config import settings


def build_server() -> uvicorn.Server:
    """Создаёт uvicorn сервер по настройкам deployment."""
    config = uvicorn.Config(
        "orders_api.services.orders_service.app:app",
        host=settings.deployment.ORDERS_SERVICE_HOST,
        port=settings.deployment.ORDERS_SERVICE_PORT,
        log_level="debug" if settings.system.DEBUG else "info",
    )
    return uvicorn.Server(config)


async def main() -> None:
    """Запуск Orders Service."""
    setup_logging()
    await log_info(
        f"Запуск Orders Service на {settings.deployment.ORDERS_SERVICE_HOST}:{settings.deployment.ORDERS_SERVICE_PORT}",
        type_msg=TypeMsg.INFO,
    )

    server = build_server()
    try:
        await server.serve()
    except asyncio.CancelledError:
        await log_info("Orders Service: graceful shutdown", type_msg=TypeMsg.DEBUG)
        await server.shutdown()

    await log_info("Orders Service остановлен", type_msg=TypeMsg.INFO)


if __name__ == "__main__":
    asyncio.run(main())
