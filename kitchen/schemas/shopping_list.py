"""Shopping List Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - name: non-blank, stored and returned exactly as sent (no trimming)
    - checked: JSON boolean only (StrictBool rejects 0/1/"true")
    - Update bodies may carry an id; matching it against the path is the route's job

Design Decisions:
    - Both fields required on create and update: update is a full replacement
    - to_fields() hands the store a domain ShoppingItem, never a raw dict
"""

from pydantic import BaseModel, StrictBool, field_validator

from kitchen.core.collection_store import Record
from kitchen.core.shopping_list import ShoppingItem


class ShoppingItemCreate(BaseModel):
    """Shopping item creation payload."""
    name: str
    checked: StrictBool

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v

    def to_fields(self) -> ShoppingItem:
        return ShoppingItem(name=self.name, checked=self.checked)


class ShoppingItemUpdate(ShoppingItemCreate):
    """Shopping item replacement payload with an optional id echoed from the client."""
    id: str | None = None


class ShoppingItemResponse(BaseModel):
    """Shopping item as returned to clients."""
    id: str
    name: str
    checked: bool

    @classmethod
    def from_record(cls, record: Record[ShoppingItem]) -> "ShoppingItemResponse":
        return cls.model_validate(record.to_dict())
