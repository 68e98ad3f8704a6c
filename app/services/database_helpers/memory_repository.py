# /halaqat-backend/app/services/database_helpers/memory_repository.py

"""
Process-local storage. Used when no DATABASE_URL is configured; everything
is lost on restart.

Rows are deep-copied on the way in and on the way out, so callers can never
mutate stored state through a returned object. An update builds the merged
row first and then swaps it in with a single assignment.

FastAPI runs the sync route handlers in a threadpool, so every primitive
holds `_lock` while it touches the tables. Two requests updating the same
row still race with last-write-wins; a reader never sees a table change
size under it.
"""

import copy
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from .base_repository import (
    BaseRepository,
    DuplicateKeyError,
    ENTITY_MODELS,
    EntityKind,
    Record,
)
from . import seed_data

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _created_at(record: Record) -> datetime:
    return record.get("createdAt") or _EPOCH


class MemoryRepository(BaseRepository):
    backend_name = "memory"

    def __init__(self, seed: bool = True, clock: Optional[Callable[[], datetime]] = None):
        super().__init__(clock=clock)
        self._tables: Dict[EntityKind, Dict[str, Record]] = {kind: {} for kind in EntityKind}
        self._lock = threading.Lock()
        if seed:
            seed_data.load_sample_roster(self)

    def _fetch(self, kind: EntityKind, entity_id: str) -> Optional[Record]:
        with self._lock:
            record = self._tables[kind].get(entity_id)
            return copy.deepcopy(record) if record is not None else None

    def _query(self, kind: EntityKind, filters: Record, newest_first: bool = False) -> List[Record]:
        with self._lock:
            rows = [
                copy.deepcopy(row) for row in self._tables[kind].values()
                if all(row.get(field) == value for field, value in filters.items())
            ]
        if newest_first:
            rows.sort(key=_created_at, reverse=True)
        return rows

    def _insert(self, kind: EntityKind, record: Record) -> Record:
        with self._lock:
            table = self._tables[kind]
            if record["id"] in table:
                raise DuplicateKeyError(f"{kind.value} id {record['id']} already exists")
            for field in ENTITY_MODELS[kind].unique_fields:
                if any(row.get(field) == record.get(field) for row in table.values()):
                    raise DuplicateKeyError(f"{kind.value}.{field} '{record.get(field)}' already exists")
            table[record["id"]] = copy.deepcopy(record)
        return copy.deepcopy(record)

    def _update(self, kind: EntityKind, entity_id: str, changes: Record) -> Optional[Record]:
        with self._lock:
            table = self._tables[kind]
            current = table.get(entity_id)
            if current is None:
                return None
            updated = {**current, **copy.deepcopy(changes)}
            table[entity_id] = updated
            return copy.deepcopy(updated)

    def _remove(self, kind: EntityKind, entity_id: str) -> bool:
        with self._lock:
            return self._tables[kind].pop(entity_id, None) is not None
