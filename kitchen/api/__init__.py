"""API Layer — FastAPI routes, store dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except 204s)

Design Decisions:
    - Thin routes delegate to the stores in core/
"""
