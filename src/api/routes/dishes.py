"""
Dish API endpoints
"""
from fastapi import APIRouter, Depends
from src.api.dependencies import get_dish_service
from src.models.base import Envelope
from src.models.dish import DishEnvelope, DishListEnvelope
from src.services.dish_service import DishService

router = APIRouter(prefix="/dishes", tags=["Dishes"])

@router.get("", response_model=DishListEnvelope)
async def list_dishes(service: DishService = Depends(get_dish_service)):
    """Список блюд"""
    return {"data": service.list_dishes()}

@router.post("", status_code=201, response_model=DishEnvelope)
async def create_dish(envelope: Envelope, service: DishService = Depends(get_dish_service)):
    """Создание блюда"""
    return {"data": service.create_dish(envelope.data)}

@router.get("/{dish_id}", response_model=DishEnvelope)
async def read_dish(dish_id: str, service: DishService = Depends(get_dish_service)):
    """Получить блюдо по ID"""
    return {"data": service.get_dish(dish_id)}

@router.put("/{dish_id}", response_model=DishEnvelope)
async def update_dish(dish_id: str, envelope: Envelope,
                      service: DishService = Depends(get_dish_service)):
    """Обновление блюда"""
    return {"data": service.update_dish(dish_id, envelope.data)}
