"""Shopping List Routes — CRUD over the app-owned ShoppingListStore.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - RecordNotFoundError / IdMismatchError propagate to the global handlers (404 / 400)
    - PUT returns 200 with the updated item; DELETE returns 204 with no body

Design Decisions:
    - Store obtained through Depends(get_shopping_list_store): no module-level state
    - Body id, when present, must equal the path id (checked before the store is touched)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from kitchen.api.dependencies import get_shopping_list_store
from kitchen.core.domain_types import RecordId, ResourceKind
from kitchen.core.errors import IdMismatchError
from kitchen.core.shopping_list import ShoppingListStore
from kitchen.schemas.shopping_list import (
    ShoppingItemCreate, ShoppingItemResponse, ShoppingItemUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/shopping-list", tags=["shopping-list"])

RESOURCE = ResourceKind.SHOPPING_ITEM.value


@router.get("", response_model=list[ShoppingItemResponse])
async def list_items(store: ShoppingListStore = Depends(get_shopping_list_store)):
    """List shopping items in insertion order."""
    return [ShoppingItemResponse.from_record(r) for r in store.list_all()]


@router.get("/{item_id}", response_model=ShoppingItemResponse)
async def get_item(
    item_id: str, store: ShoppingListStore = Depends(get_shopping_list_store),
):
    """Get one shopping item."""
    return ShoppingItemResponse.from_record(store.get(RecordId(item_id)))


@router.post(
    "", response_model=ShoppingItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(
    body: ShoppingItemCreate,
    store: ShoppingListStore = Depends(get_shopping_list_store),
):
    """Add a shopping item. The store assigns its id."""
    record = store.add(body.to_fields())
    logger.info(
        f"Created shopping list item {record.fields.name}",
        extra={"resource": RESOURCE, "record_id": record.id},
    )
    return ShoppingItemResponse.from_record(record)


@router.put("/{item_id}", response_model=ShoppingItemResponse)
async def update_item(
    item_id: str,
    body: ShoppingItemUpdate,
    store: ShoppingListStore = Depends(get_shopping_list_store),
):
    """Replace a shopping item's fields. Its id and position are kept."""
    if body.id is not None and body.id != item_id:
        raise IdMismatchError(item_id, body.id)
    record = store.update(RecordId(item_id), body.to_fields())
    logger.info(
        f"Updated shopping list item {item_id}",
        extra={"resource": RESOURCE, "record_id": item_id},
    )
    return ShoppingItemResponse.from_record(record)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: str, store: ShoppingListStore = Depends(get_shopping_list_store),
):
    """Delete a shopping item. Its id is never reissued."""
    store.delete(RecordId(item_id))
    logger.info(
        f"Deleted shopping list item {item_id}",
        extra={"resource": RESOURCE, "record_id": item_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
