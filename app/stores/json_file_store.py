import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from app.interfaces.record_store import RecordStore

logger = logging.getLogger(__name__)


class JsonFileRecordStore(RecordStore):
    """Record store persisted as a single JSON object on disk.

    The file is loaded lazily on first access and rewritten in full on every
    ``put``; writes are serialized so the file always holds every key
    written so far. There is no eviction; the file grows with every new key.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._data: dict[str, dict[str, Any]] | None = None
        self._write_lock = asyncio.Lock()

    async def get(self, key: str) -> dict[str, Any] | None:
        data = await self._load()
        return data.get(key)

    async def put(self, key: str, value: dict[str, Any]) -> None:
        data = await self._load()
        async with self._write_lock:
            data[key] = value
            snapshot = dict(data)
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, lambda: _write(self._path, snapshot))

    async def _load(self) -> dict[str, dict[str, Any]]:
        if self._data is None:
            loop = asyncio.get_running_loop()
            loaded = await loop.run_in_executor(None, lambda: _read(self._path))
            if self._data is None:
                self._data = loaded
        return self._data


def _read(path: Path) -> dict[str, dict[str, Any]]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning("Ignoring corrupt record store %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring record store %s: top level is not an object", path)
        return {}
    return data


def _write(path: Path, data: dict[str, dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp_path.replace(path)
