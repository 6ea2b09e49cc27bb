"""
Order lifecycle: allowed statuses, terminal state and deletion policy
"""
from typing import Any, Mapping
from src.models.base import OrderStatus
from .rules import Step
from .standards import ErrorKind, ValidationResult

STATUS_MESSAGE = "Order must have a status of " + ", ".join(s.value for s in OrderStatus)

class OrderLifecycle:
    """Машина состояний заказа"""

    INITIAL = OrderStatus.PENDING
    TERMINAL = OrderStatus.DELIVERED
    STATES = frozenset(s.value for s in OrderStatus)

    @classmethod
    def is_known(cls, status: Any) -> bool:
        return isinstance(status, str) and status in cls.STATES

    @classmethod
    def can_transition(cls, current: str, target: Any) -> bool:
        """Любой известный статус достижим из любого, кроме delivered"""
        return current != cls.TERMINAL.value and cls.is_known(target)

    @classmethod
    def check_mutable(cls, current: str) -> ValidationResult:
        # заказ изменяем, пока из него есть хоть один переход
        if not any(cls.can_transition(current, state) for state in cls.STATES):
            return ValidationResult.failure(
                ErrorKind.IMMUTABLE_ORDER, "status",
                "A delivered order cannot be changed"
            )
        return ValidationResult.success()

    @classmethod
    def check_status(cls, record: Mapping[str, Any]) -> ValidationResult:
        status = record.get("status")
        if status is None or status == "":
            return ValidationResult.failure(ErrorKind.MISSING_STATUS, "status", STATUS_MESSAGE)
        if not cls.is_known(status):
            return ValidationResult.failure(ErrorKind.INVALID_STATUS, "status", STATUS_MESSAGE)
        return ValidationResult.success()

    @classmethod
    def check_transition(cls, current: str, record: Mapping[str, Any]) -> ValidationResult:
        """Статус из запроса обязателен, известен и достижим из текущего"""
        result = cls.check_status(record)
        if not result.ok:
            return result
        if not cls.can_transition(current, record["status"]):
            return cls.check_mutable(current)
        return ValidationResult.success()

    @classmethod
    def check_deletable(cls, current: str) -> ValidationResult:
        if current != cls.INITIAL.value:
            return ValidationResult.failure(
                ErrorKind.ORDER_NOT_DELETABLE, "status",
                "An order cannot be deleted unless it is pending"
            )
        return ValidationResult.success()

    @classmethod
    def mutable_step(cls, current: str) -> Step:
        def step(record):
            return cls.check_mutable(current)
        return step

    @classmethod
    def transition_step(cls, current: str) -> Step:
        def step(record):
            return cls.check_transition(current, record)
        return step
