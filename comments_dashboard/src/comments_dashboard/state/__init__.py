"""
Persistence of the comment table preferences.
"""

from .repository import ViewStateRepository
from .store import JsonFileStore, KeyValueStore, MemoryStore

__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore", "ViewStateRepository"]
