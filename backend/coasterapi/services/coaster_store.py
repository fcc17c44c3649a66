from __future__ import annotations

import random
import time
from threading import Lock

from coasterapi.core.errors import CoasterNotFoundError
from coasterapi.models.coaster import CoasterRecord, CreateCoasterRequest


class CoasterStore:
    """Thread-safe in-memory store for coaster records.

    A single lock guards the mapping. It is held only while entries are read,
    copied or written; encoding and I/O happen on the copies afterwards.
    """

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._lock = Lock()
        self._records: dict[str, CoasterRecord] = {}
        self._rng = rng or random.Random()
        self._last_id_ns = 0

    def list(self) -> list[CoasterRecord]:
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records.values()]

    def get(self, coaster_id: str) -> CoasterRecord:
        with self._lock:
            record = self._records.get(coaster_id)
            if record is None:
                raise CoasterNotFoundError(coaster_id)
            return record.model_copy(deep=True)

    def pick_random(self) -> str:
        with self._lock:
            if not self._records:
                raise CoasterNotFoundError()
            return self._rng.choice(list(self._records))

    def insert(self, candidate: CreateCoasterRequest) -> str:
        with self._lock:
            coaster_id = self._next_id()
            self._records[coaster_id] = CoasterRecord.from_request(coaster_id, candidate)
        return coaster_id

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _next_id(self) -> str:
        # Caller holds the lock. Nanosecond clock, forced strictly increasing.
        now_ns = time.time_ns()
        self._last_id_ns = now_ns if now_ns > self._last_id_ns else self._last_id_ns + 1
        return str(self._last_id_ns)
