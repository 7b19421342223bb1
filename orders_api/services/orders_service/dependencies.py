from fastapi import Depends, Request

from orders_api.core.orders.queue import OrderQueue
from orders_api.core.orders.repository import OrderRepository
from orders_api.core.orders.service import OrderService
from orders_api.infra.database import DatabaseManager


def get_database() -> DatabaseManager:
    return DatabaseManager()


def get_order_repository(db: DatabaseManager = Depends(get_database)) -> OrderRepository:
    return OrderRepository(db)


def get_order_queue(request: Request) -> OrderQueue:
    # Очередь создаётся в lifespan приложения, одна на процесс
    return request.app.state.order_queue


def get_order_service(
    repository: OrderRepository = Depends(get_order_repository),
    queue: OrderQueue = Depends(get_order_queue),
) -> OrderService:
    return OrderService(repository, queue)
