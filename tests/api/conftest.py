"""API test fixtures — fresh stores + FastAPI test client.

Invariants:
    - Every test gets its own seeded ShoppingListStore and RecipeStore
    - Store dependencies overridden to hand those stores to the routes
    - app.state carries the same stores, so readiness sees them too

Design Decisions:
    - httpx ASGITransport does not run the lifespan: stores are attached by the
      fixture instead, and the lifespan is covered separately in test_app_lifespan
"""

import pytest
from httpx import ASGITransport, AsyncClient

from kitchen.api.dependencies import get_recipe_store, get_shopping_list_store
from kitchen.core.recipes import RecipeStore
from kitchen.core.shopping_list import ShoppingListStore
from kitchen.main import app


@pytest.fixture
def shopping_store():
    return ShoppingListStore()


@pytest.fixture
def recipe_store():
    return RecipeStore()


@pytest.fixture
async def client(shopping_store, recipe_store):
    """FastAPI test client with store dependencies overridden."""
    app.dependency_overrides[get_shopping_list_store] = lambda: shopping_store
    app.dependency_overrides[get_recipe_store] = lambda: recipe_store
    app.state.shopping_list = shopping_store
    app.state.recipes = recipe_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.shopping_list = None
    app.state.recipes = None
