"""Mini README: Concrete ledger store backends.

Each module subclasses ``LedgerStore`` and calls ``REGISTRY.register`` at
import time so the backend becomes selectable by name.
"""

from .json_file_store import JsonFileStore
from .memory_store import InMemoryStore

__all__ = ["InMemoryStore", "JsonFileStore"]
