"""
Search History Store

Keeps the most recent searches (newest first) under a single Redis key
holding a JSON array. Falls back to an in-process store when Redis is
unavailable. A missing or corrupt list reads as empty history.
"""
import time
from datetime import datetime, timezone
from typing import List, Optional

import redis
from pydantic import TypeAdapter, ValidationError

from scholar_search.core.config import settings
from scholar_search.core.logging import get_logger
from scholar_search.schemas.history import HistoryEntry

logger = get_logger(__name__)

_entries_adapter = TypeAdapter(List[HistoryEntry])


class HistoryStore:
    """Bounded, most-recent-first log of past searches."""

    def __init__(
        self,
        client: Optional[redis.Redis] = None,
        key: Optional[str] = None,
        capacity: Optional[int] = None
    ):
        self.key = key or settings.HISTORY_KEY
        self.capacity = capacity if capacity is not None else settings.HISTORY_CAPACITY
        if self.capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self._fallback_store = {}
        self._client: Optional[redis.Redis] = client
        self._connected = client is not None
        if client is None:
            self._connect()

    def _connect(self):
        """Attempt to connect to Redis."""
        try:
            self._client = redis.Redis(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=0,
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2
            )
            self._client.ping()
            self._connected = True
            logger.info("Connected to Redis history store")
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning(f"Redis not available, using in-memory history: {e}")
            self._client = None
            self._connected = False

    def _read_raw(self) -> Optional[str]:
        if self._connected and self._client:
            return self._client.get(self.key)
        return self._fallback_store.get(self.key)

    def _write_raw(self, data: str) -> None:
        if self._connected and self._client:
            self._client.set(self.key, data)
        else:
            self._fallback_store[self.key] = data

    def _decode(self, data: Optional[str]) -> List[HistoryEntry]:
        if not data:
            return []
        try:
            return _entries_adapter.validate_json(data)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable search history: {e.error_count()} errors")
            return []

    def load(self) -> List[HistoryEntry]:
        """
        Return the stored history, newest first.

        Returns an empty list when nothing is stored, the backend cannot
        be read, or the stored value does not decode.
        """
        try:
            data = self._read_raw()
        except redis.RedisError as e:
            logger.error(f"History read error: {e}")
            return []
        return self._decode(data)

    def record(self, query: str, result_count: int) -> HistoryEntry:
        """
        Add a search to the front of the history and persist the list.

        Entries beyond capacity are dropped from the end (oldest first).
        If the stored list cannot be read, the entry is returned without
        writing so the existing history is not overwritten.
        """
        try:
            entries = self._decode(self._read_raw())
            readable = True
        except redis.RedisError as e:
            logger.error(f"History read error, not saving '{query[:50]}': {e}")
            entries = []
            readable = False

        entry_id = int(time.time() * 1000)
        if entries and entry_id <= entries[0].id:
            entry_id = entries[0].id + 1

        entry = HistoryEntry(
            id=entry_id,
            query=query,
            timestamp=datetime.now(timezone.utc).isoformat(),
            results=result_count
        )

        if not readable:
            return entry

        entries.insert(0, entry)
        entries = entries[:self.capacity]

        try:
            self._write_raw(_entries_adapter.dump_json(entries).decode("utf-8"))
        except redis.RedisError as e:
            logger.error(f"History write error: {e}")

        return entry

    def clear(self) -> bool:
        """Remove all stored history."""
        try:
            if self._connected and self._client:
                self._client.delete(self.key)
            else:
                self._fallback_store.pop(self.key, None)
            return True
        except redis.RedisError as e:
            logger.error(f"History clear error: {e}")
            return False

    @property
    def is_connected(self) -> bool:
        """Check if Redis is connected."""
        return self._connected
