"""Mini README: JSON file store backend.

Structure:
    * JsonFileStore - keeps every key in one JSON object on disk.

Writes land in a temporary sibling file first and are moved into place with
``os.replace`` so a crash never leaves a half-written ledger file. Blocking
file access runs in a worker thread to keep the event loop responsive.
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Dict, Optional

from ..base import LedgerStore, StorageError
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class JsonFileStore(LedgerStore):
    """Persist blobs in ``<directory>/<filename>`` as a JSON object."""

    backend_name = "json-file"

    def __init__(self, directory: Path | str = "data", filename: str = "ledger_store.json") -> None:
        super().__init__()
        self.path = Path(directory).expanduser() / filename

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            raise StorageError(f"Cannot read store file {self.path}: {error}") from error
        if not isinstance(payload, dict):
            raise StorageError(f"Store file {self.path} does not hold a JSON object")
        return payload

    def _write_all(self, payload: Dict[str, str]) -> None:
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(temp_path, self.path)
        except OSError as error:
            raise StorageError(f"Cannot write store file {self.path}: {error}") from error

    def _set_sync(self, key: str, blob: str) -> bool:
        payload = self._read_all()
        payload[key] = blob
        self._write_all(payload)
        LOGGER.debug("Wrote key '%s' to %s", key, self.path)
        return True

    async def get(self, key: str) -> Optional[str]:
        payload = await asyncio.to_thread(self._read_all)
        value = payload.get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Key '{key}' in {self.path} is not a string blob")
        return value

    async def set(self, key: str, blob: str) -> bool:
        return await asyncio.to_thread(self._set_sync, key, blob)

    def metadata(self) -> Dict[str, str]:
        return {"backend": self.backend_name, "path": str(self.path)}


REGISTRY.register(JsonFileStore)
