"""
Order management service
"""
from typing import Any, Dict, Iterable, List
from src.business import OrderLifecycle, ResourceStandards, order_pipeline
from src.business.rules import ValidationPipeline, identity_step
from src.business.validators import normalize_integers
from src.services.store import ResourceStore, pick_fields
from src.utils.logger import logger

ORDER_FIELDS = tuple(rule.name for rule in ResourceStandards.ORDER_RULES.rules) + ("status",)

class OrderService:
    """Сервис управления заказами"""

    resource = "Order"

    def __init__(self, store: ResourceStore):
        self.store = store

    def list_orders(self) -> List[Dict[str, Any]]:
        return self.store.list_all()

    def get_order(self, order_id: str) -> Dict[str, Any]:
        return self.store.find_by_id(order_id)

    def create_order(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Создание заказа; новый заказ всегда в статусе pending"""
        order_pipeline().enforce(record)

        fields = order_fields(record)
        initial = OrderLifecycle.INITIAL.value
        if fields.get("status") not in (None, "", initial):
            logger.warning("Ignoring non-initial status on create",
                           submitted=fields["status"], status=initial)
        fields["status"] = initial

        order = self.store.insert(fields)
        logger.resource_event(self.resource, "created", id=order["id"], lines=len(order["dishes"]))
        return order

    def update_order(self, order_id: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """
        Обновление заказа

        Порядок проверок: id маршрута, неизменяемость delivered,
        поля заказа, позиции, переход статуса.
        """
        with self.store.lock:
            current = self.store.find_by_id(order_id)

            pipeline = ValidationPipeline([
                identity_step(self.resource, order_id),
                OrderLifecycle.mutable_step(current["status"]),
            ]).then(*order_pipeline().steps, OrderLifecycle.transition_step(current["status"]))
            pipeline.enforce(record)

            order = self.store.replace(order_id, order_fields(record))

        logger.resource_event(self.resource, "updated", id=order_id,
                              status_from=current["status"], status_to=order["status"])
        return order

    def delete_order(self, order_id: str) -> None:
        """Удаление заказа (только pending)"""
        with self.store.lock:
            current = self.store.find_by_id(order_id)

            ValidationPipeline([
                lambda record: OrderLifecycle.check_deletable(record["status"])
            ]).enforce(current)

            self.store.remove(order_id)

        logger.resource_event(self.resource, "deleted", id=order_id)

    def seed(self, records: Iterable[Dict[str, Any]]) -> int:
        """Загрузка начальных заказов с их статусами"""
        pipeline = order_pipeline().then(OrderLifecycle.check_status)
        valid = []
        for record in records:
            record = {"status": OrderLifecycle.INITIAL.value, **record}
            pipeline.enforce(record)
            valid.append({"id": record.get("id"), **order_fields(record)})
        loaded = self.store.load(valid)
        logger.info("Orders loaded", count=loaded)
        return loaded

def order_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    """Поля заказа из запроса; количества в позициях хранятся как int"""
    fields = pick_fields(record, ORDER_FIELDS)
    if "dishes" in fields:
        fields["dishes"] = [
            normalize_integers(line, ResourceStandards.ORDER_LINE_RULE)
            for line in fields["dishes"]
        ]
    return fields
