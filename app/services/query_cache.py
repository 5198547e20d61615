import logging

from pydantic import ValidationError

from app.interfaces.record_store import RecordStore
from app.models import BookRecord

logger = logging.getLogger(__name__)


class QueryCache:
    """Maps a query key to the ``BookRecord`` last extracted for it.

    Keys are used as given apart from the storage namespace prefix; only
    successful extractions are ever written.
    """

    def __init__(self, store: RecordStore, namespace: str = "") -> None:
        self._store = store
        self._namespace = namespace

    def _storage_key(self, query_key: str) -> str:
        return self._namespace + query_key

    async def get(self, query_key: str) -> BookRecord | None:
        payload = await self._store.get(self._storage_key(query_key))
        if payload is None:
            return None
        try:
            return BookRecord.model_validate(payload)
        except ValidationError as e:
            logger.warning("Discarding unreadable cache entry for %r: %s", query_key, e)
            return None

    async def put(self, query_key: str, record: BookRecord) -> None:
        await self._store.put(self._storage_key(query_key), record.model_dump(mode="json"))
