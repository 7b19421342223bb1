from fastapi import APIRouter, Depends, HTTPException, Response, status

from orders_api.core.orders.exceptions import OrderNotFoundError
from orders_api.core.orders.models import OrderCreateDTO, OrderSummary, QueueStatusDTO
from orders_api.core.orders.service import OrderService
from orders_api.services.orders_service.dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["Orders"])

_EMPTY_QUEUE = {status.HTTP_204_NO_CONTENT: {"description": "Queue is empty"}}


@router.post("/", response_model=OrderSummary, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: OrderCreateDTO,
    service: OrderService = Depends(get_order_service),
):
    return await service.create_order(request)


@router.get("/", response_model=list[OrderSummary])
async def list_orders(service: OrderService = Depends(get_order_service)):
    return await service.list_orders()


# Маршруты очереди объявлены до /{order_id}
@router.get("/queue", response_model=list[OrderSummary])
async def get_queue(service: OrderService = Depends(get_order_service)):
    return service.queue_snapshot()


@router.get("/queue/status", response_model=QueueStatusDTO)
async def get_queue_status(service: OrderService = Depends(get_order_service)):
    return service.queue_status()


@router.get("/queue/next", response_model=OrderSummary, responses=_EMPTY_QUEUE)
async def peek_next_order(service: OrderService = Depends(get_order_service)):
    summary = service.peek_next_order()
    if summary is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return summary


@router.post("/queue/next", response_model=OrderSummary, responses=_EMPTY_QUEUE)
async def process_next_order(service: OrderService = Depends(get_order_service)):
    summary = service.process_next_order()
    if summary is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return summary


@router.get("/{order_id}", response_model=OrderSummary)
async def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
):
    try:
        return await service.get_order(order_id)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
