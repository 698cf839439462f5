"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary; stores only ever see domain field objects
    - Response schemas mirror Record.to_dict() exactly: {id, ...fields}

Design Decisions:
    - Separate from core: schemas are API contracts, core types are the stored shape
"""
