from typing import Any, Callable, Dict, Mapping, Sequence
from .standards import (
    ErrorKind, FieldKind, FieldRule, Ruleset, ValidationResult
)

def is_positive_integer(value: Any) -> bool:
    """Целое число > 0; строки с цифрами и bool не принимаются"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        # JSON не различает 2 и 2.0
        return value.is_integer() and value > 0
    return False

def as_integer(value: Any) -> Any:
    """Целочисленное значение поля: 2.0 -> 2, остальное без изменений"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value

def normalize_integers(record: Mapping[str, Any], ruleset: Ruleset) -> Dict[str, Any]:
    """Копия записи, где int-поля правил приведены к int (хранилище не держит float)"""
    normalized = dict(record)
    for rule in ruleset.rules:
        if rule.kind == FieldKind.REQUIRED_POSITIVE_INTEGER and rule.name in normalized:
            normalized[rule.name] = as_integer(normalized[rule.name])
    return normalized

def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))

class FieldValidator:
    """Проверка записи по декларативному набору правил"""

    @staticmethod
    def validate(record: Mapping[str, Any], ruleset: Ruleset) -> ValidationResult:
        # Правила проверяются по порядку, первая ошибка прерывает проверку
        for rule in ruleset.rules:
            result = FieldValidator.check(record, rule, ruleset.resource)
            if not result.ok:
                return result
        return ValidationResult.success()

    @staticmethod
    def check(record: Mapping[str, Any], rule: FieldRule, resource: str) -> ValidationResult:
        checker = _CHECKS[rule.kind]
        return checker(record, rule, resource)

    @staticmethod
    def _check_text(record, rule, resource):
        if record.get(rule.name) is None:
            return ValidationResult.failure(
                ErrorKind.MISSING_FIELD, rule.name,
                f"{resource} must include a {rule.name}"
            )
        value = record[rule.name]
        if not isinstance(value, str) or not len(value):
            return ValidationResult.failure(
                ErrorKind.EMPTY_FIELD, rule.name,
                f"{resource} must include a {rule.name}"
            )
        return ValidationResult.success()

    @staticmethod
    def _check_positive_integer(record, rule, resource):
        if record.get(rule.name) is None:
            return ValidationResult.failure(
                ErrorKind.MISSING_FIELD, rule.name,
                f"{resource} must include a {rule.name}"
            )
        if not is_positive_integer(record[rule.name]):
            return ValidationResult.failure(
                ErrorKind.INVALID_NUMBER, rule.name,
                f"{resource} must have a {rule.name} that is an integer greater than 0"
            )
        return ValidationResult.success()

    @staticmethod
    def _check_nonempty_sequence(record, rule, resource):
        value = record.get(rule.name)
        if value is None or not is_sequence(value):
            return ValidationResult.failure(
                ErrorKind.MISSING_FIELD, rule.name,
                f"{resource} must include a {rule.name} list"
            )
        if not len(value):
            return ValidationResult.failure(
                ErrorKind.EMPTY_SEQUENCE, rule.name,
                f"{resource} must include at least one {rule.item or 'item'}"
            )
        return ValidationResult.success()

_CHECKS: Dict[FieldKind, Callable[[Mapping[str, Any], FieldRule, str], ValidationResult]] = {
    FieldKind.REQUIRED_TEXT: FieldValidator._check_text,
    FieldKind.REQUIRED_POSITIVE_INTEGER: FieldValidator._check_positive_integer,
    FieldKind.REQUIRED_NONEMPTY_SEQUENCE: FieldValidator._check_nonempty_sequence,
}

class LineItemValidator:
    """Проверка каждой позиции вложенной коллекции"""

    @staticmethod
    def validate_lines(lines: Sequence[Any], line_rule: Ruleset) -> ValidationResult:
        for index, line in enumerate(lines):
            if isinstance(line, Mapping):
                result = FieldValidator.validate(line, line_rule)
                if result.ok:
                    continue
                field = result.issue.field
            else:
                field = line_rule.rules[0].name
            return ValidationResult.failure(
                ErrorKind.INVALID_LINE_QUANTITY, field,
                f"{line_rule.resource} {index} must have a {field} that is an integer greater than 0",
                index=index
            )
        return ValidationResult.success()
