"""
Base models for the GrubDash API
"""
from pydantic import BaseModel, Field
from typing import Any, Dict
from enum import Enum

class GrubDashBaseModel(BaseModel):
    """Базовая модель записи: неизвестные поля сохраняются"""

    class Config:
        extra = "allow"
        use_enum_values = True
        populate_by_name = True

class OrderStatus(str, Enum):
    """Статусы заказа"""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

class Envelope(BaseModel):
    """Тело запроса/ответа вида {"data": ...}"""
    data: Dict[str, Any] = Field(default_factory=dict, description="Запись ресурса")
