"""Key-value store persisted as a single JSON document on disk.

Every ``set`` rewrites the whole document through a temporary file that is then
moved over the original, so a crash mid-write leaves the previous version intact.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional

from fridge.utilities.errors import PersistenceError

logger = logging.getLogger(__name__)

_MISSING = object()


class JsonKeyValueStore:
    def __init__(self, path):
        self.path = Path(path)
        self._lock = Lock()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                store = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Unreadable store %s, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(store, dict):
            logger.warning("Store %s does not hold a JSON object, treating as empty", self.path)
            return {}
        return store

    def _atomic_write(self, store: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.stem}_", suffix=".json"
            )
        except OSError as e:
            raise PersistenceError(f"Cannot write store {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        except OSError as e:
            raise PersistenceError(f"Cannot write store {self.path}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        with self._lock:
            value = self._read().get(key, _MISSING)
        return default if value is _MISSING else value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            store = self._read()
            store[key] = value
            self._atomic_write(store)

    def delete(self, key: str) -> bool:
        with self._lock:
            store = self._read()
            if key not in store:
                return False
            del store[key]
            self._atomic_write(store)
            return True

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._read().keys())


__all__ = ['JsonKeyValueStore']
