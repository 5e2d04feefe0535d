import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PreferenceStore(ABC):
    """Small persisted key/value store for user preferences."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class MemoryPreferenceStore(PreferenceStore):
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonPreferenceStore(PreferenceStore):
    """Preferences kept in a JSON file, re-read on every access."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load_raw(self) -> dict:
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    return data
                logger.error("Ignoring %s: expected a JSON object", self.path.name)
            except (json.JSONDecodeError, OSError) as e:
                logger.error("Failed to load %s: %s", self.path.name, e)
        return {}

    def _save_raw(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        value = self._load_raw().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        raw = self._load_raw()
        raw[key] = value
        self._save_raw(raw)
