"""Recipes — recipe fields and the seeded recipe store.

Invariants:
    - Recipe.name is a non-blank string
    - Recipe.ingredients is an ordered tuple of non-blank strings (may be empty)
    - A seeded store starts with "boiled white rice" then "milkshake"
"""

from dataclasses import dataclass
from typing import Any

from kitchen.core.collection_store import CollectionStore
from kitchen.core.domain_types import ResourceKind
from kitchen.core.enforce_fields import require_text, require_text_sequence


@dataclass(frozen=True)
class Recipe:
    name: str
    ingredients: tuple[str, ...] = ()

    def __post_init__(self):
        require_text(self.name, "name")
        # frozen: the list-to-tuple conversion goes through object.__setattr__
        object.__setattr__(
            self, "ingredients",
            require_text_sequence(self.ingredients, "ingredients"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "ingredients": list(self.ingredients)}


SEED_RECIPES: tuple[Recipe, ...] = (
    Recipe(
        name="boiled white rice",
        ingredients=("1 cup white rice", "2 cups water", "pinch of salt"),
    ),
    Recipe(
        name="milkshake",
        ingredients=("2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"),
    ),
)


class RecipeStore(CollectionStore[Recipe]):
    """Recipes, seeded at construction unless seed=False."""

    def __init__(self, *, seed: bool = True, **kwargs):
        super().__init__(Recipe, ResourceKind.RECIPE, **kwargs)
        if seed:
            for recipe in SEED_RECIPES:
                self.add(recipe)
