"""Mini README: Storage boundary for the persisted ledger blob.

Re-exports the abstract ``LedgerStore``, the backend ``REGISTRY`` and the
built-in backends. Importing the package registers ``memory`` and
``json-file``.
"""

from .base import LedgerStore, StorageError
from .registry import REGISTRY, StoreRegistry
from . import providers  # noqa: F401  # ensure built-in backends register on import
from .providers import InMemoryStore, JsonFileStore

__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "LedgerStore",
    "REGISTRY",
    "StorageError",
    "StoreRegistry",
]
