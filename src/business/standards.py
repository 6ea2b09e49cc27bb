from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

class FieldKind(str, Enum):
    REQUIRED_TEXT = "required-text"
    REQUIRED_POSITIVE_INTEGER = "required-positive-integer"
    REQUIRED_NONEMPTY_SEQUENCE = "required-nonempty-sequence"

class ErrorKind(str, Enum):
    MISSING_FIELD = "MissingField"
    EMPTY_FIELD = "EmptyField"
    INVALID_NUMBER = "InvalidNumber"
    EMPTY_SEQUENCE = "EmptySequence"
    INVALID_LINE_QUANTITY = "InvalidLineQuantity"
    MISSING_STATUS = "MissingStatus"
    INVALID_STATUS = "InvalidStatus"
    IMMUTABLE_ORDER = "ImmutableOrder"
    ID_MISMATCH = "IdMismatch"
    NOT_FOUND = "NotFound"
    ORDER_NOT_DELETABLE = "OrderNotDeletable"

@dataclass(frozen=True)
class FieldRule:
    name: str
    kind: FieldKind
    # подпись элемента коллекции в сообщениях ("at least one dish")
    item: Optional[str] = None

@dataclass(frozen=True)
class Ruleset:
    resource: str
    rules: Tuple[FieldRule, ...]

@dataclass
class ValidationIssue:
    kind: ErrorKind
    field: str
    message: str
    index: Optional[int] = None

@dataclass
class ValidationResult:
    issue: Optional[ValidationIssue] = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, kind: ErrorKind, field: str, message: str,
                index: Optional[int] = None) -> "ValidationResult":
        return cls(ValidationIssue(kind=kind, field=field, message=message, index=index))

class ResourceStandards:
    """Правила полей для блюд и заказов"""

    DISH_RULES = Ruleset("Dish", (
        FieldRule("name", FieldKind.REQUIRED_TEXT),
        FieldRule("description", FieldKind.REQUIRED_TEXT),
        FieldRule("price", FieldKind.REQUIRED_POSITIVE_INTEGER),
        FieldRule("image_url", FieldKind.REQUIRED_TEXT),
    ))

    ORDER_RULES = Ruleset("Order", (
        FieldRule("deliverTo", FieldKind.REQUIRED_TEXT),
        FieldRule("mobileNumber", FieldKind.REQUIRED_TEXT),
        FieldRule("dishes", FieldKind.REQUIRED_NONEMPTY_SEQUENCE, item="dish"),
    ))

    # Проверка каждой позиции заказа
    ORDER_LINE_RULE = Ruleset("Dish", (
        FieldRule("quantity", FieldKind.REQUIRED_POSITIVE_INTEGER),
    ))
