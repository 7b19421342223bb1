#!/usr/bin/env python3
# create_db.py
"""
Создаёт базу данных сервиса заказов, если её ещё нет.
Схема применяется при старте сервиса (migrations/init.sql).
"""

import asyncio

import asyncpg

from orders_api.common.constants import TypeMsg
from orders_api.common.logger import log_error, log_info
from orders_api.config import settings


async def create_db() -> bool:
    """
    Returns:
        True если база создана или уже существует
    """
    db_name = settings.database.DB_NAME
    try:
        # Подключаемся к служебной БД postgres
        sys_conn = await asyncpg.connect(
            user=settings.database.DB_USER,
            password=settings.database.DB_PASSWORD,
            host=settings.database.DB_HOST,
            port=settings.database.DB_PORT,
            database="postgres",
        )
    except (OSError, asyncpg.PostgresError) as e:
        await log_error(f"Не удалось подключиться к PostgreSQL: {e}")
        return False

    try:
        exists = await sys_conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", db_name)
        if exists:
            await log_info(f"База данных {db_name} уже существует", type_msg=TypeMsg.INFO)
        else:
            await log_info(f"Создание базы данных {db_name}...", type_msg=TypeMsg.INFO)
            # CREATE DATABASE не принимает параметры запроса
            await sys_conn.execute(f'CREATE DATABASE "{db_name}"')
            await log_info(f"База данных {db_name} создана", type_msg=TypeMsg.INFO)
        return True
    finally:
        await sys_conn.close()


if __name__ == "__main__":
    asyncio.run(create_db())
