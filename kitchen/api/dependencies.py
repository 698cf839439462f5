"""Store Dependencies — hand the app-owned stores to route handlers.

Invariants:
    - Stores are created by the application lifespan and live on app.state
    - Routes never construct or cache a store themselves

Design Decisions:
    - Dependency functions over module-level singletons: tests override them with
      fresh stores per test via app.dependency_overrides
"""

from fastapi import Request

from kitchen.core.recipes import RecipeStore
from kitchen.core.shopping_list import ShoppingListStore


def get_shopping_list_store(request: Request) -> ShoppingListStore:
    """FastAPI dependency for the shopping list store."""
    store = getattr(request.app.state, "shopping_list", None)
    if store is None:
        raise RuntimeError("Shopping list store not initialized")
    return store


def get_recipe_store(request: Request) -> RecipeStore:
    """FastAPI dependency for the recipe store."""
    store = getattr(request.app.state, "recipes", None)
    if store is None:
        raise RuntimeError("Recipe store not initialized")
    return store
