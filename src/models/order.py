"""
Order models
"""
from pydantic import BaseModel, Field
from typing import List
from src.models.base import GrubDashBaseModel, OrderStatus

class OrderLineItem(GrubDashBaseModel):
    """Позиция заказа: ссылка на блюдо и количество"""

    quantity: int = Field(..., gt=0, description="Количество")

class Order(GrubDashBaseModel):
    """Заказ на доставку"""

    id: str = Field(..., description="Уникальный ID заказа")
    deliverTo: str = Field(..., min_length=1, description="Адрес доставки")
    mobileNumber: str = Field(..., min_length=1, description="Телефон")
    status: OrderStatus = Field(OrderStatus.PENDING, description="Статус заказа")
    dishes: List[OrderLineItem] = Field(..., min_length=1, description="Позиции заказа")

class OrderEnvelope(BaseModel):
    data: Order

class OrderListEnvelope(BaseModel):
    data: List[Order]
