"""
Validation core для GrubDash
Проверка полей блюд и заказов и жизненный цикл заказа
"""

from .errors import ServiceError, NotFoundError
from .lifecycle import OrderLifecycle
from .rules import ValidationPipeline, dish_pipeline, order_pipeline, check_identity
from .standards import (
    ErrorKind,
    FieldKind,
    FieldRule,
    Ruleset,
    ResourceStandards,
    ValidationIssue,
    ValidationResult
)
from .validators import FieldValidator, LineItemValidator

__all__ = [
    'ServiceError',
    'NotFoundError',
    'OrderLifecycle',
    'ValidationPipeline',
    'dish_pipeline',
    'order_pipeline',
    'check_identity',
    'ErrorKind',
    'FieldKind',
    'FieldRule',
    'Ruleset',
    'ResourceStandards',
    'ValidationIssue',
    'ValidationResult',
    'FieldValidator',
    'LineItemValidator'
]

__version__ = '1.0.0'
