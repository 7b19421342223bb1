# orders_api/core/orders/models.py
"""
Модели данных заказов.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class Order(BaseModel):
    """Заказ в том виде, в котором он хранится в БД."""

    id: int = Field(..., description="ID, назначенный хранилищем")
    customer_name: Optional[str] = Field(None, description="Имя клиента")
    description: Optional[str] = Field(None, description="Описание заказа")
    value: Optional[Decimal] = Field(None, description="Сумма заказа")
    created_at: datetime = Field(..., description="Время создания")

    class Config:
        from_attributes = True


class OrderCreateDTO(BaseModel):
    """
    DTO для создания заказа.
    Поля не валидируются: сервис только обрезает пробелы в строках.
    """

    customer_name: Optional[str] = None
    description: Optional[str] = None
    value: Optional[Decimal] = None


class OrderSummary(BaseModel):
    """
    Проекция заказа для очереди и ответов API.
    Неизменяемая копия, снятая в момент создания или чтения.
    """

    id: int
    customer_name: Optional[str] = None
    description: Optional[str] = None
    value: Optional[Decimal] = None
    created_at: datetime

    class Config:
        from_attributes = True
        frozen = True

    @classmethod
    def from_order(cls, order: Order) -> "OrderSummary":
        """Строит проекцию из сохранённого заказа."""
        return cls(
            id=order.id,
            customer_name=order.customer_name,
            description=order.description,
            value=order.value,
            created_at=order.created_at,
        )


class QueueStatusDTO(BaseModel):
    """Состояние очереди заказов."""

    size: int
    is_empty: bool
    orders: list[OrderSummary] = Field(default_factory=list)
