# /halaqat-backend/app/services/database_helpers/base_repository.py

"""
This module defines the storage contract that every backend implements.

`BaseRepository` owns everything that must behave identically across
backends: identifier and timestamp assignment, payload validation, error
containment and the conversion of raw rows into Pydantic entities. A
concrete backend only supplies five primitives (`_fetch`, `_query`,
`_insert`, `_update`, `_remove`) that work on plain dictionaries keyed by
the application's camelCase field names.

Failure policy: no exception raised by a backend primitive ever crosses
this boundary. Each guarded call yields a `StorageResult` whose outcome is
`found`, `not_found` or `backend_error`; the entity-family methods collapse
the last two into the same soft signal (`None`, `[]` or `False`) and the
error itself is only visible in the logs.
"""

import copy
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel

from app.core.security import verify_password
from app.models.parent_model import Parent, ParentCreate
from app.models.quran_error_model import QuranError, QuranErrorCreate
from app.models.record_model import DailyRecord, DailyRecordCreate, DailyRecordUpdate
from app.models.student_model import Student, StudentCreate, StudentUpdate
from app.models.teacher_model import Teacher, TeacherCreate

logger = logging.getLogger(__name__)

T = TypeVar("T")
Record = Dict[str, Any]
Payload = Union[BaseModel, Dict[str, Any]]


class StorageError(Exception):
    """Raised by backend primitives; always caught by `BaseRepository`."""


class DuplicateKeyError(StorageError):
    pass


# --- Entity Registry ---

class EntityKind(str, Enum):
    TEACHER = "teacher"
    PARENT = "parent"
    STUDENT = "student"
    DAILY_RECORD = "daily_record"
    QURAN_ERROR = "quran_error"


@dataclass(frozen=True)
class EntityModels:
    model: Type[BaseModel]
    create_model: Type[BaseModel]
    update_model: Optional[Type[BaseModel]] = None
    unique_fields: Tuple[str, ...] = ()


ENTITY_MODELS: Dict[EntityKind, EntityModels] = {
    EntityKind.TEACHER: EntityModels(Teacher, TeacherCreate, unique_fields=("username",)),
    EntityKind.PARENT: EntityModels(Parent, ParentCreate, unique_fields=("username",)),
    EntityKind.STUDENT: EntityModels(Student, StudentCreate, StudentUpdate),
    EntityKind.DAILY_RECORD: EntityModels(DailyRecord, DailyRecordCreate, DailyRecordUpdate),
    EntityKind.QURAN_ERROR: EntityModels(QuranError, QuranErrorCreate),
}

ACCOUNT_KINDS = (EntityKind.TEACHER, EntityKind.PARENT)


# --- Result Type ---

class Outcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    BACKEND_ERROR = "backend_error"


@dataclass(frozen=True)
class StorageResult(Generic[T]):
    """
    Tri-state outcome of a storage call. The HTTP layer still treats
    `not_found` and `backend_error` alike, but they stay distinguishable here.
    """
    outcome: Outcome
    value: Optional[T] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.FOUND

    def unwrap_or(self, default):
        return self.value if self.ok else default


# --- Time Helpers ---

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ceil_to_millisecond(moment: datetime) -> datetime:
    """
    Rounds up to whole milliseconds, the precision of the document store, so
    every backend keeps exactly the timestamp `create` returned and that
    timestamp is never earlier than the call.
    """
    remainder = moment.microsecond % 1000
    if remainder:
        moment = moment + timedelta(microseconds=1000 - remainder)
    return moment


def as_utc(value: Any) -> Any:
    """Drivers hand back naive datetimes (SQLite, pymongo); stored values are UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


class BaseRepository(ABC):
    backend_name = "base"

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or utc_now
        self._last_created_at: Optional[datetime] = None
        self._stamp_lock = threading.Lock()

    # --- Backend Primitives ---

    @abstractmethod
    def _fetch(self, kind: EntityKind, entity_id: str) -> Optional[Record]:
        """Returns the stored row for `entity_id`, or None."""

    @abstractmethod
    def _query(self, kind: EntityKind, filters: Record, newest_first: bool = False) -> List[Record]:
        """Returns every row whose fields equal `filters` (all rows when empty)."""

    @abstractmethod
    def _insert(self, kind: EntityKind, record: Record) -> Record:
        """Persists a complete row and returns it as stored."""

    @abstractmethod
    def _update(self, kind: EntityKind, entity_id: str, changes: Record) -> Optional[Record]:
        """Applies `changes` in one write; returns the new row, or None if missing."""

    @abstractmethod
    def _remove(self, kind: EntityKind, entity_id: str) -> bool:
        """Deletes one row; True only if a row was actually removed."""

    def close(self) -> None:
        """Releases the backend connection, if the backend holds one."""

    def _next_created_at(self) -> datetime:
        """
        Creation times handed out by one repository are strictly increasing:
        a call landing in the same millisecond as the previous one (or a
        clock that went backwards) is pushed one millisecond past it. Every
        backend orders listings on `createdAt` alone, so ties never reach
        the sort.
        """
        with self._stamp_lock:
            moment = ceil_to_millisecond(self._clock())
            if self._last_created_at is not None and moment <= self._last_created_at:
                moment = self._last_created_at + timedelta(milliseconds=1)
            self._last_created_at = moment
            return moment

    # --- Guarded Generic Operations ---

    def _guard(self, operation: str, kind: EntityKind, call: Callable[[], Any]) -> StorageResult:
        try:
            value = call()
        except Exception:
            logger.exception(
                "%s storage failed during %s on %s", self.backend_name, operation, kind.value
            )
            return StorageResult(Outcome.BACKEND_ERROR)
        if value is None or value is False:
            return StorageResult(Outcome.NOT_FOUND, value)
        return StorageResult(Outcome.FOUND, value)

    def _to_entity(self, kind: EntityKind, record: Optional[Record]) -> Optional[BaseModel]:
        if record is None:
            return None
        record = dict(record)
        record["createdAt"] = as_utc(record.get("createdAt"))
        return ENTITY_MODELS[kind].model.model_validate(record)

    def _to_entities(self, kind: EntityKind, records: List[Record]) -> List[BaseModel]:
        entities = []
        for record in records:
            try:
                entities.append(self._to_entity(kind, record))
            except ValueError as e:
                logger.warning(
                    "Skipping corrupted %s row %s: %s", kind.value, record.get("id", "N/A"), e
                )
        return entities

    def lookup(self, kind: EntityKind, entity_id: str) -> StorageResult:
        return self._guard(
            "lookup", kind, lambda: self._to_entity(kind, self._fetch(kind, entity_id))
        )

    def find(self, kind: EntityKind, newest_first: bool = False, **filters) -> StorageResult:
        return self._guard(
            "find", kind, lambda: self._to_entities(kind, self._query(kind, filters, newest_first))
        )

    def find_one(self, kind: EntityKind, **filters) -> StorageResult:
        result = self.find(kind, **filters)
        if not result.ok:
            return result
        if not result.value:
            return StorageResult(Outcome.NOT_FOUND)
        return StorageResult(Outcome.FOUND, result.value[0])

    def insert(self, kind: EntityKind, payload: Payload) -> StorageResult:
        """
        Validates `payload` against the kind's create contract, stamps a new
        id and creation time, and persists it. Invalid payloads raise
        pydantic's ValidationError before any backend call is made.
        """
        create_model = ENTITY_MODELS[kind].create_model
        if isinstance(payload, BaseModel):
            payload = payload.model_dump()
        validated = create_model.model_validate(payload)

        record = validated.model_dump(mode="json")
        record["id"] = str(uuid.uuid4())
        record["createdAt"] = self._next_created_at()
        return self._guard(
            "insert", kind, lambda: self._to_entity(kind, self._insert(kind, copy.deepcopy(record)))
        )

    def modify(self, kind: EntityKind, entity_id: str, changes: Payload) -> StorageResult:
        """
        Merges the supplied fields onto the stored entity. Fields left unset
        in `changes` are untouched; an id that does not exist is never created.
        """
        update_model = ENTITY_MODELS[kind].update_model
        if update_model is None:
            raise TypeError(f"{kind.value} entities do not support updates")
        if isinstance(changes, BaseModel):
            fields = changes.model_dump(mode="json", exclude_unset=True)
        else:
            fields = update_model.model_validate(changes).model_dump(mode="json", exclude_unset=True)

        if not fields:
            return self.lookup(kind, entity_id)
        return self._guard(
            "update", kind, lambda: self._to_entity(kind, self._update(kind, entity_id, fields))
        )

    def remove(self, kind: EntityKind, entity_id: str) -> StorageResult:
        return self._guard("delete", kind, lambda: self._remove(kind, entity_id))

    def validate_credentials(self, kind: EntityKind, username: str, password: str):
        """
        Looks the account up by username and compares the password. Any
        mismatch, missing account or backend failure yields None.
        """
        if kind not in ACCOUNT_KINDS:
            raise ValueError(f"{kind.value} entities have no credentials")
        account = self.find_one(kind, username=username).unwrap_or(None)
        if account is None or not verify_password(password, account.password):
            return None
        return account

    # --- Teachers ---

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return self.lookup(EntityKind.TEACHER, teacher_id).unwrap_or(None)

    def get_teacher_by_username(self, username: str) -> Optional[Teacher]:
        return self.find_one(EntityKind.TEACHER, username=username).unwrap_or(None)

    def get_all_teachers(self) -> List[Teacher]:
        return self.find(EntityKind.TEACHER).unwrap_or([])

    def create_teacher(self, teacher: Payload) -> Optional[Teacher]:
        return self.insert(EntityKind.TEACHER, teacher).unwrap_or(None)

    def validate_teacher(self, username: str, password: str) -> Optional[Teacher]:
        return self.validate_credentials(EntityKind.TEACHER, username, password)

    # --- Parents ---

    def get_parent(self, parent_id: str) -> Optional[Parent]:
        return self.lookup(EntityKind.PARENT, parent_id).unwrap_or(None)

    def get_parent_by_username(self, username: str) -> Optional[Parent]:
        return self.find_one(EntityKind.PARENT, username=username).unwrap_or(None)

    def get_all_parents(self) -> List[Parent]:
        return self.find(EntityKind.PARENT).unwrap_or([])

    def create_parent(self, parent: Payload) -> Optional[Parent]:
        return self.insert(EntityKind.PARENT, parent).unwrap_or(None)

    def validate_parent(self, username: str, password: str) -> Optional[Parent]:
        return self.validate_credentials(EntityKind.PARENT, username, password)

    # --- Students ---

    def get_student(self, student_id: str) -> Optional[Student]:
        return self.lookup(EntityKind.STUDENT, student_id).unwrap_or(None)

    def get_all_students(self) -> List[Student]:
        return self.find(EntityKind.STUDENT).unwrap_or([])

    def get_students_by_teacher(self, teacher_id: str) -> List[Student]:
        return self.find(EntityKind.STUDENT, teacherId=teacher_id).unwrap_or([])

    def get_students_by_parent(self, parent_id: str) -> List[Student]:
        return self.find(EntityKind.STUDENT, parentId=parent_id).unwrap_or([])

    def create_student(self, student: Payload) -> Optional[Student]:
        return self.insert(EntityKind.STUDENT, student).unwrap_or(None)

    def update_student(self, student_id: str, changes: Payload) -> Optional[Student]:
        return self.modify(EntityKind.STUDENT, student_id, changes).unwrap_or(None)

    def delete_student(self, student_id: str) -> bool:
        return self.remove(EntityKind.STUDENT, student_id).unwrap_or(False)

    # --- Daily Records (always most recent first) ---

    def get_daily_record(self, record_id: str) -> Optional[DailyRecord]:
        return self.lookup(EntityKind.DAILY_RECORD, record_id).unwrap_or(None)

    def get_daily_records_by_student(self, student_id: str) -> List[DailyRecord]:
        return self.find(EntityKind.DAILY_RECORD, newest_first=True, studentId=student_id).unwrap_or([])

    def get_daily_records_by_teacher(self, teacher_id: str) -> List[DailyRecord]:
        return self.find(EntityKind.DAILY_RECORD, newest_first=True, teacherId=teacher_id).unwrap_or([])

    def create_daily_record(self, record: Payload) -> Optional[DailyRecord]:
        return self.insert(EntityKind.DAILY_RECORD, record).unwrap_or(None)

    def update_daily_record(self, record_id: str, changes: Payload) -> Optional[DailyRecord]:
        return self.modify(EntityKind.DAILY_RECORD, record_id, changes).unwrap_or(None)

    def delete_daily_record(self, record_id: str) -> bool:
        return self.remove(EntityKind.DAILY_RECORD, record_id).unwrap_or(False)

    # --- Quran Errors ---

    def get_quran_error(self, error_id: str) -> Optional[QuranError]:
        return self.lookup(EntityKind.QURAN_ERROR, error_id).unwrap_or(None)

    def get_quran_errors_by_student(self, student_id: str) -> List[QuranError]:
        return self.find(EntityKind.QURAN_ERROR, studentId=student_id).unwrap_or([])

    def create_quran_error(self, error: Payload) -> Optional[QuranError]:
        return self.insert(EntityKind.QURAN_ERROR, error).unwrap_or(None)

    def delete_quran_error(self, error_id: str) -> bool:
        return self.remove(EntityKind.QURAN_ERROR, error_id).unwrap_or(False)
