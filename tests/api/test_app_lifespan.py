"""Application lifespan — stores built on startup, dropped on shutdown.

Invariants:
    - Each startup builds new stores (no state carried between app instances)
    - SEED_DATA=false starts both stores empty
"""

from kitchen.main import create_app, lifespan


async def test_lifespan_attaches_seeded_stores():
    """Startup attaches seeded stores; shutdown detaches them."""
    app = create_app()
    async with lifespan(app):
        assert len(app.state.shopping_list) == 3
        assert len(app.state.recipes) == 2
    assert app.state.shopping_list is None
    assert app.state.recipes is None


async def test_lifespan_respects_seed_setting(monkeypatch):
    """SEED_DATA=false starts both stores empty."""
    monkeypatch.setenv("SEED_DATA", "false")
    app = create_app()
    async with lifespan(app):
        assert len(app.state.shopping_list) == 0
        assert len(app.state.recipes) == 0


async def test_each_startup_builds_fresh_stores():
    """A restart does not carry over deletions."""
    app = create_app()
    async with lifespan(app):
        first = app.state.shopping_list
        first.delete(first.list_all()[0].id)
    async with lifespan(app):
        assert app.state.shopping_list is not first
        assert len(app.state.shopping_list) == 3


async def test_routes_registered():
    """Every resource and health path is in the OpenAPI schema."""
    app = create_app()
    paths = set(app.openapi()["paths"])
    assert {
        "/shopping-list", "/shopping-list/{item_id}",
        "/recipes", "/recipes/{recipe_id}",
        "/health/", "/health/ready",
    } <= paths
