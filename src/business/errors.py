"""
Service errors surfaced to API callers
"""
from typing import Optional
from .standards import ErrorKind, ValidationIssue

class ServiceError(Exception):
    """Ошибка пользовательского ввода или политики заказа (400)"""

    status_code = 400

    def __init__(self, kind: ErrorKind, message: str,
                 field: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field
        self.index = index

    @classmethod
    def from_issue(cls, issue: ValidationIssue) -> "ServiceError":
        return cls(issue.kind, issue.message, field=issue.field, index=issue.index)

    def to_dict(self) -> dict:
        return {"error": self.message}

class NotFoundError(ServiceError):
    """Запись не найдена (404)"""

    status_code = 404

    def __init__(self, resource: str, record_id: str):
        super().__init__(ErrorKind.NOT_FOUND, f"{resource} does not exist: {record_id}", field="id")
        self.resource = resource
        self.record_id = record_id
