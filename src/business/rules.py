from typing import Any, Callable, Iterable, List, Mapping, Optional
from .errors import ServiceError
from .standards import ErrorKind, ResourceStandards, Ruleset, ValidationResult
from .validators import FieldValidator, LineItemValidator

Step = Callable[[Mapping[str, Any]], ValidationResult]

class ValidationPipeline:
    """Упорядоченная цепочка проверок запроса"""

    def __init__(self, steps: Iterable[Step]):
        self.steps: List[Step] = list(steps)

    def run(self, record: Mapping[str, Any]) -> ValidationResult:
        """
        Прогон всех шагов по порядку

        Args:
            record: Данные из тела запроса

        Returns:
            Первая ошибка или успех, если все шаги пройдены
        """
        for step in self.steps:
            result = step(record)
            if not result.ok:
                return result
        return ValidationResult.success()

    def enforce(self, record: Mapping[str, Any]) -> None:
        """Прогон с исключением ServiceError при первой ошибке"""
        result = self.run(record)
        if not result.ok:
            raise ServiceError.from_issue(result.issue)

    def then(self, *steps: Step) -> "ValidationPipeline":
        return ValidationPipeline(self.steps + list(steps))

def fields_step(ruleset: Ruleset) -> Step:
    def step(record):
        return FieldValidator.validate(record, ruleset)
    return step

def lines_step(field: str, line_rule: Ruleset) -> Step:
    # Выполняется после fields_step, поэтому поле уже непустой список
    def step(record):
        return LineItemValidator.validate_lines(record[field], line_rule)
    return step

def identity_step(resource: str, route_id: str) -> Step:
    def step(record):
        return check_identity(resource, route_id, record)
    return step

def check_identity(resource: str, route_id: str, record: Mapping[str, Any]) -> ValidationResult:
    """id в теле запроса (если передан) должен совпадать с id маршрута"""
    submitted: Optional[Any] = record.get("id")
    if submitted in (None, "") or str(submitted) == str(route_id):
        return ValidationResult.success()
    return ValidationResult.failure(
        ErrorKind.ID_MISMATCH, "id",
        f"{resource} id does not match route id. {resource}: {submitted}, Route: {route_id}"
    )

def dish_pipeline() -> ValidationPipeline:
    return ValidationPipeline([fields_step(ResourceStandards.DISH_RULES)])

def order_pipeline() -> ValidationPipeline:
    return ValidationPipeline([
        fields_step(ResourceStandards.ORDER_RULES),
        lines_step("dishes", ResourceStandards.ORDER_LINE_RULE),
    ])
