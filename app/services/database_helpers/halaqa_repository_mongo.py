# /halaqat-backend/app/services/database_helpers/halaqa_repository_mongo.py

"""
Document-store implementation of the storage contract (MongoDB via pymongo).

Each entity kind lives in its own collection and the entity id is the
document `_id`. Listings are single equality-filtered queries; there are no
cross-collection joins. An update is one `$set`, which MongoDB applies to a
single document atomically.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from .base_repository import BaseRepository, ENTITY_MODELS, EntityKind, Record

logger = logging.getLogger(__name__)

COLLECTIONS: Dict[EntityKind, str] = {
    EntityKind.TEACHER: "teachers",
    EntityKind.PARENT: "parents",
    EntityKind.STUDENT: "students",
    EntityKind.DAILY_RECORD: "dailyRecords",
    EntityKind.QURAN_ERROR: "quranErrors",
}

# Foreign-key fields the listing operations filter on.
LOOKUP_FIELDS: Dict[EntityKind, tuple] = {
    EntityKind.STUDENT: ("teacherId", "parentId"),
    EntityKind.DAILY_RECORD: ("studentId", "teacherId"),
    EntityKind.QURAN_ERROR: ("studentId",),
}


def _to_document(record: Record) -> Record:
    document = dict(record)
    document["_id"] = document.pop("id")
    return document


def _from_document(document: Optional[Record]) -> Optional[Record]:
    if document is None:
        return None
    record = dict(document)
    record["id"] = record.pop("_id")
    return record


class DocumentRepository(BaseRepository):
    backend_name = "document"

    def __init__(
        self,
        client,
        database_name: str = "halaqat",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(clock=clock)
        self.client = client
        self.db = client[database_name]
        self._ensure_indexes()

    def _collection(self, kind: EntityKind):
        return self.db[COLLECTIONS[kind]]

    def _ensure_indexes(self) -> None:
        try:
            for kind, models in ENTITY_MODELS.items():
                for field in models.unique_fields:
                    self._collection(kind).create_index([(field, ASCENDING)], unique=True)
            for kind, fields in LOOKUP_FIELDS.items():
                for field in fields:
                    self._collection(kind).create_index([(field, ASCENDING)])
        except PyMongoError:
            logger.exception("Could not create document-store indexes")

    def close(self) -> None:
        self.client.close()

    def _fetch(self, kind: EntityKind, entity_id: str) -> Optional[Record]:
        return _from_document(self._collection(kind).find_one({"_id": entity_id}))

    def _query(self, kind: EntityKind, filters: Record, newest_first: bool = False) -> List[Record]:
        cursor = self._collection(kind).find(dict(filters))
        if newest_first:
            cursor = cursor.sort("createdAt", DESCENDING)
        return [_from_document(document) for document in cursor]

    def _insert(self, kind: EntityKind, record: Record) -> Record:
        document = _to_document(record)
        self._collection(kind).insert_one(document)
        # Read back so the caller sees the value exactly as the store keeps it.
        return _from_document(self._collection(kind).find_one({"_id": document["_id"]}))

    def _update(self, kind: EntityKind, entity_id: str, changes: Record) -> Optional[Record]:
        document = self._collection(kind).find_one_and_update(
            {"_id": entity_id},
            {"$set": dict(changes)},
            return_document=ReturnDocument.AFTER,
        )
        return _from_document(document)

    def _remove(self, kind: EntityKind, entity_id: str) -> bool:
        return self._collection(kind).delete_one({"_id": entity_id}).deleted_count > 0
