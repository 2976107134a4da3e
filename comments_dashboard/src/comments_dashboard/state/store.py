"""Key-value stores backing the persisted table preferences."""

import json
import os
import tempfile
import threading
from typing import Dict, Optional, Protocol

from loguru import logger


class KeyValueStore(Protocol):
    """A protocol for string-keyed, string-valued durable storage."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...


class MemoryStore:
    """Process-local store; nothing survives a restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)


class JsonFileStore:
    """
    JSON file implementation of the KeyValueStore protocol.
    
    The whole file is rewritten on every ``set`` so a reload always sees the
    latest values. A missing or unreadable file is treated as empty. Writes
    are serialized with a lock because Streamlit sessions share one instance.
    """
    
    def __init__(self, path: str):
        """
        Initialize the store with a file path.
        
        Args:
            path: Path to the JSON file
        """
        self.path = path
        self._lock = threading.Lock()
        self._ensure_directory()
        self._values = self._read()
    
    def _ensure_directory(self) -> None:
        """Ensure the directory for the JSON file exists."""
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
    
    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self.path}: expected a JSON object")
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}
    
    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)
    
    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value
            self._write(dict(self._values))
    
    def _write(self, values: Dict[str, str]) -> None:
        # Unique temp file in the same directory so os.replace stays atomic
        directory = os.path.dirname(self.path) or "."
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
        ) as f:
            json.dump(values, f, indent=2, sort_keys=True)
            tmp_path = f.name
        try:
            os.replace(tmp_path, self.path)
        except OSError:
            os.unlink(tmp_path)
            raise
