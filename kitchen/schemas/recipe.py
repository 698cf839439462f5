"""Recipe Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - name: non-blank, stored and returned exactly as sent
    - ingredients: list of non-blank strings, kept verbatim and in order
"""

from pydantic import BaseModel, field_validator

from kitchen.core.collection_store import Record
from kitchen.core.recipes import Recipe


class RecipeCreate(BaseModel):
    """Recipe creation payload."""
    name: str
    ingredients: list[str]

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("ingredients")
    @classmethod
    def reject_blank_ingredients(cls, v: list[str]) -> list[str]:
        if any(not i.strip() for i in v):
            raise ValueError("ingredients cannot contain empty entries")
        return v

    def to_fields(self) -> Recipe:
        return Recipe(name=self.name, ingredients=tuple(self.ingredients))


class RecipeUpdate(RecipeCreate):
    """Recipe replacement payload with an optional id echoed from the client."""
    id: str | None = None


class RecipeResponse(BaseModel):
    """Recipe as returned to clients."""
    id: str
    name: str
    ingredients: list[str]

    @classmethod
    def from_record(cls, record: Record[Recipe]) -> "RecipeResponse":
        return cls.model_validate(record.to_dict())
