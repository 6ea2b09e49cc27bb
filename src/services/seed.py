"""
Initial data loading from JSON files
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional
from src.utils.logger import logger

def load_records(path: Optional[str]) -> List[Dict[str, Any]]:
    """
    Чтение начальных записей

    Args:
        path: Путь к JSON-файлу: массив записей или {"data": [...]}

    Returns:
        Список записей; пустой, если путь не задан или файла нет
    """
    if not path:
        return []

    seed_path = Path(path)
    if not seed_path.exists():
        logger.warning("Seed data file not found, starting empty", path=str(seed_path))
        return []

    with open(seed_path, 'r', encoding='utf-8') as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        payload = payload.get("data", [])

    if not isinstance(payload, list) or not all(isinstance(r, dict) for r in payload):
        raise ValueError(f"Seed data must be a list of objects: {seed_path}")

    logger.debug("Seed data read", path=str(seed_path), count=len(payload))
    return payload
