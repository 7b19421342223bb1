from contextlib import asynccontextmanager

from fastapi import FastAPI

from orders_api.common.constants import TypeMsg
from orders_api.common.logger import log_info, setup_logging
from orders_api.config import settings
from orders_api.core.orders.queue import OrderQueue
from orders_api.infra.database import close_db, get_db, init_db
from orders_api.services.orders_service.routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    await log_info("Starting Orders Service...", type_msg=TypeMsg.INFO)
    await init_db()
    app.state.order_queue = OrderQueue()

    yield

    # Shutdown
    await log_info(
        f"Shutting down Orders Service, queued orders discarded: {app.state.order_queue.size()}",
        type_msg=TypeMsg.INFO,
    )
    await close_db()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Orders Service",
        description="Orders CRUD with an in-memory processing queue",
        version=settings.system.VERSION,
        lifespan=lifespan,
    )

    app.include_router(router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "service": "orders_service",
            "database": await get_db().health_check(),
        }

    return app


app = create_app()
