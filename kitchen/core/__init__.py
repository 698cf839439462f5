"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Stores signal failures with KitchenError subclasses only

Design Decisions:
    - Functional core separated from the FastAPI shell: stores are testable without a client
"""
