"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps the opaque string id issued by a store — never build one by hand
      outside a store or a test
    - Every resource the API serves is named by a ResourceKind member

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """Resource families exposed over HTTP. Value is the display name in errors."""
    SHOPPING_ITEM = "ShoppingItem"
    RECIPE = "Recipe"
