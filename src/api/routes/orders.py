"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, Response
from src.api.dependencies import get_order_service
from src.models.base import Envelope
from src.models.order import OrderEnvelope, OrderListEnvelope
from src.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

@router.get("", response_model=OrderListEnvelope)
async def list_orders(service: OrderService = Depends(get_order_service)):
    """Список заказов"""
    return {"data": service.list_orders()}

@router.post("", status_code=201, response_model=OrderEnvelope)
async def create_order(envelope: Envelope, service: OrderService = Depends(get_order_service)):
    """Создание заказа"""
    return {"data": service.create_order(envelope.data)}

@router.get("/{order_id}", response_model=OrderEnvelope)
async def read_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """Получить заказ по ID"""
    return {"data": service.get_order(order_id)}

@router.put("/{order_id}", response_model=OrderEnvelope)
async def update_order(order_id: str, envelope: Envelope,
                       service: OrderService = Depends(get_order_service)):
    """Обновление заказа"""
    return {"data": service.update_order(order_id, envelope.data)}

@router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """Удаление заказа (только pending)"""
    service.delete_order(order_id)
    return Response(status_code=204)
