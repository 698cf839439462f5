"""Collection Store — ordered in-memory store of records with store-issued ids.

Invariants:
    - Every live record has a unique id; an id is never issued twice by one store,
      even after the record holding it was deleted
    - list_all() returns live records in insertion order; update keeps position
    - A record's id never changes; update replaces every other field
    - update/delete on an unknown id raise RecordNotFoundError and leave the store as it was
    - All operations run under one lock per store (no interleaved reads/writes)

Design Decisions:
    - Records are frozen dataclasses: update swaps the list slot for a new Record,
      so a caller holding an old Record never observes a half-applied change
    - threading.Lock over asyncio.Lock: operations never await, and FastAPI may run
      sync dependencies in its threadpool
    - Issued ids kept in a set: uniqueness guaranteed, not just probable
"""

import threading
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, TypeVar

from kitchen.core.domain_types import RecordId, ResourceKind
from kitchen.core.errors import InvalidInputError, RecordNotFoundError


class RecordFields(Protocol):
    """Structural contract for the domain fields held by a Record."""
    def to_dict(self) -> dict[str, Any]: ...


T = TypeVar("T", bound=RecordFields)


def new_record_id() -> RecordId:
    return RecordId(str(uuid.uuid4()))


@dataclass(frozen=True)
class Record(Generic[T]):
    """A stored item: store-issued id plus domain fields."""
    id: RecordId
    fields: T

    def to_dict(self) -> dict[str, Any]:
        """Flatten to the wire shape {id, ...fields}."""
        return {"id": self.id, **self.fields.to_dict()}


class CollectionStore(Generic[T]):
    """Ordered store of Record[T] — the only mutation surface for its records."""

    def __init__(
        self,
        field_type: type[T],
        resource: ResourceKind,
        id_factory: Callable[[], RecordId] = new_record_id,
    ):
        self.field_type = field_type
        self.resource = resource
        self._id_factory = id_factory
        self._records: list[Record[T]] = []
        self._issued_ids: set[RecordId] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return self._index_of(record_id) is not None

    def list_all(self) -> list[Record[T]]:
        """Live records in insertion order. Returns a copy."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: RecordId) -> Record[T]:
        with self._lock:
            return self._records[self._require_index(record_id)]

    def add(self, fields: T) -> Record[T]:
        """Append a new record under a freshly issued id."""
        self._check_fields(fields)
        with self._lock:
            record = Record(id=self._issue_id(), fields=fields)
            self._records.append(record)
            return record

    def update(self, record_id: RecordId, fields: T) -> Record[T]:
        """Replace all non-id fields of a record, keeping its position."""
        self._check_fields(fields)
        with self._lock:
            index = self._require_index(record_id)
            record = Record(id=self._records[index].id, fields=fields)
            self._records[index] = record
            return record

    def delete(self, record_id: RecordId) -> None:
        """Remove a record. Its id stays retired."""
        with self._lock:
            del self._records[self._require_index(record_id)]

    # ─── Internals (caller holds the lock) ──────────────────────

    def _issue_id(self) -> RecordId:
        record_id = self._id_factory()
        while record_id in self._issued_ids:
            record_id = self._id_factory()
        self._issued_ids.add(record_id)
        return record_id

    def _index_of(self, record_id: object) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _require_index(self, record_id: RecordId) -> int:
        index = self._index_of(record_id)
        if index is None:
            raise RecordNotFoundError(self.resource.value, record_id)
        return index

    def _check_fields(self, fields: object) -> None:
        if not isinstance(fields, self.field_type):
            raise InvalidInputError(
                f"Expected {self.field_type.__name__} fields, "
                f"got {type(fields).__name__}",
                "fields",
            )
