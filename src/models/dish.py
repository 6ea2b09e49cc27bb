"""
Dish models
"""
from pydantic import BaseModel, Field
from typing import List
from src.models.base import GrubDashBaseModel

class Dish(GrubDashBaseModel):
    """Блюдо в каталоге"""

    id: str = Field(..., description="Уникальный ID блюда")
    name: str = Field(..., min_length=1, description="Название")
    description: str = Field(..., min_length=1, description="Описание")
    price: int = Field(..., gt=0, description="Цена")
    image_url: str = Field(..., min_length=1, description="Ссылка на изображение")

class DishEnvelope(BaseModel):
    data: Dish

class DishListEnvelope(BaseModel):
    data: List[Dish]
