"""
In-memory identity-keyed record store
"""
import copy
import threading
from typing import Any, Dict, Iterable, List, Optional
from src.business.errors import NotFoundError

Record = Dict[str, Any]

class ResourceStore:
    """Коллекция записей одного типа с доступом по id"""

    def __init__(self, resource: str):
        self.resource = resource
        self._records: Dict[str, Record] = {}
        self._last_id = 0
        # все выданные и загруженные id, чтобы не выдавать их повторно
        self._seen_ids = set()
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Блокировка коллекции: проверка и изменение под одной блокировкой"""
        return self._lock

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: str) -> bool:
        return str(record_id) in self._records

    def list_all(self) -> List[Record]:
        """Все записи в порядке добавления"""
        with self._lock:
            return [copy.deepcopy(record) for record in self._records.values()]

    def get(self, record_id: str) -> Optional[Record]:
        with self._lock:
            record = self._records.get(str(record_id))
            return copy.deepcopy(record) if record is not None else None

    def find_by_id(self, record_id: str) -> Record:
        """Получить запись по ID или NotFoundError"""
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(self.resource, record_id)
        return record

    def insert(self, record: Record) -> Record:
        """Добавить запись с новым id"""
        with self._lock:
            stored = copy.deepcopy(dict(record))
            stored["id"] = self._next_id()
            self._records[stored["id"]] = stored
            return copy.deepcopy(stored)

    def replace(self, record_id: str, partial: Record) -> Record:
        """Слить переданные поля поверх существующей записи"""
        with self._lock:
            existing = self._records.get(str(record_id))
            if existing is None:
                raise NotFoundError(self.resource, record_id)
            changes = {key: value for key, value in partial.items() if key != "id"}
            existing.update(copy.deepcopy(changes))
            return copy.deepcopy(existing)

    def remove(self, record_id: str) -> None:
        with self._lock:
            if self._records.pop(str(record_id), None) is None:
                raise NotFoundError(self.resource, record_id)

    def load(self, records: Iterable[Record]) -> int:
        """Загрузка записей с готовыми id (начальные данные)"""
        loaded = 0
        with self._lock:
            for record in records:
                stored = copy.deepcopy(dict(record))
                if stored.get("id") in (None, ""):
                    stored["id"] = self._next_id()
                stored["id"] = str(stored["id"])
                self._records[stored["id"]] = stored
                self._seen_ids.add(stored["id"])
                if stored["id"].isdecimal():
                    # новые id всегда больше загруженных числовых
                    self._last_id = max(self._last_id, int(stored["id"]))
                loaded += 1
        return loaded

    def _next_id(self) -> str:
        while True:
            self._last_id += 1
            candidate = str(self._last_id)
            if candidate not in self._seen_ids:
                self._seen_ids.add(candidate)
                return candidate

def pick_fields(record: Record, fields: Iterable[str]) -> Record:
    """Только известные поля ресурса, присутствующие в записи"""
    return {name: record[name] for name in fields if name in record}
