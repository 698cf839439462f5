"""Shopping List — item fields and the seeded shopping list store.

Invariants:
    - ShoppingItem.name is a non-blank string; checked is a real bool
    - A seeded store starts with beans, tomatoes, peppers (all unchecked), in that order
"""

from dataclasses import dataclass
from typing import Any

from kitchen.core.collection_store import CollectionStore
from kitchen.core.domain_types import ResourceKind
from kitchen.core.enforce_fields import require_bool, require_text


@dataclass(frozen=True)
class ShoppingItem:
    name: str
    checked: bool = False

    def __post_init__(self):
        require_text(self.name, "name")
        require_bool(self.checked, "checked")

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "checked": self.checked}


SEED_ITEMS: tuple[ShoppingItem, ...] = (
    ShoppingItem(name="beans", checked=False),
    ShoppingItem(name="tomatoes", checked=False),
    ShoppingItem(name="peppers", checked=False),
)


class ShoppingListStore(CollectionStore[ShoppingItem]):
    """Shopping items, seeded at construction unless seed=False."""

    def __init__(self, *, seed: bool = True, **kwargs):
        super().__init__(ShoppingItem, ResourceKind.SHOPPING_ITEM, **kwargs)
        if seed:
            for item in SEED_ITEMS:
                self.add(item)
