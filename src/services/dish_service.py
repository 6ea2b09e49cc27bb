"""
Dish catalogue service
"""
from typing import Any, Dict, Iterable, List
from src.business import ResourceStandards, dish_pipeline
from src.business.rules import ValidationPipeline, fields_step, identity_step
from src.business.validators import normalize_integers
from src.services.store import ResourceStore, pick_fields
from src.utils.logger import logger

DISH_FIELDS = tuple(rule.name for rule in ResourceStandards.DISH_RULES.rules)

class DishService:
    """Сервис управления блюдами"""

    resource = "Dish"

    def __init__(self, store: ResourceStore):
        self.store = store

    def list_dishes(self) -> List[Dict[str, Any]]:
        return self.store.list_all()

    def get_dish(self, dish_id: str) -> Dict[str, Any]:
        return self.store.find_by_id(dish_id)

    def create_dish(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Создание блюда после проверки всех полей"""
        dish_pipeline().enforce(record)

        dish = self.store.insert(dish_fields(record))
        logger.resource_event(self.resource, "created", id=dish["id"], name=dish["name"])
        return dish

    def update_dish(self, dish_id: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """Обновление блюда: переданные поля сливаются с текущей записью"""
        with self.store.lock:
            self.store.find_by_id(dish_id)

            pipeline = ValidationPipeline([
                identity_step(self.resource, dish_id),
                fields_step(ResourceStandards.DISH_RULES),
            ])
            pipeline.enforce(record)

            dish = self.store.replace(dish_id, dish_fields(record))

        logger.resource_event(self.resource, "updated", id=dish_id)
        return dish

    def seed(self, records: Iterable[Dict[str, Any]]) -> int:
        """Загрузка начальных блюд; каждая запись проходит ту же проверку"""
        pipeline = dish_pipeline()
        valid = []
        for record in records:
            pipeline.enforce(record)
            valid.append({"id": record.get("id"), **dish_fields(record)})
        loaded = self.store.load(valid)
        logger.info("Dishes loaded", count=loaded)
        return loaded

def dish_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    """Поля блюда из запроса; цена хранится как int"""
    return normalize_integers(pick_fields(record, DISH_FIELDS), ResourceStandards.DISH_RULES)
