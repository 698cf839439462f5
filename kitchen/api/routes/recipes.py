"""Recipe Routes — CRUD over the app-owned RecipeStore.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - RecordNotFoundError / IdMismatchError propagate to the global handlers (404 / 400)
    - PUT returns 200 with the updated recipe, same contract as /shopping-list

Design Decisions:
    - PUT answers with the updated body instead of an empty 204: both resources
      share one update contract
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from kitchen.api.dependencies import get_recipe_store
from kitchen.core.domain_types import RecordId, ResourceKind
from kitchen.core.errors import IdMismatchError
from kitchen.core.recipes import RecipeStore
from kitchen.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/recipes", tags=["recipes"])

RESOURCE = ResourceKind.RECIPE.value


@router.get("", response_model=list[RecipeResponse])
async def list_recipes(store: RecipeStore = Depends(get_recipe_store)):
    """List recipes in insertion order."""
    return [RecipeResponse.from_record(r) for r in store.list_all()]


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: str, store: RecipeStore = Depends(get_recipe_store),
):
    return RecipeResponse.from_record(store.get(RecordId(recipe_id)))


@router.post(
    "", response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_recipe(
    body: RecipeCreate, store: RecipeStore = Depends(get_recipe_store),
):
    """Add a recipe. The store assigns its id."""
    record = store.add(body.to_fields())
    logger.info(
        f"Created recipe {record.fields.name}",
        extra={"resource": RESOURCE, "record_id": record.id},
    )
    return RecipeResponse.from_record(record)


@router.put("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: str,
    body: RecipeUpdate,
    store: RecipeStore = Depends(get_recipe_store),
):
    """Replace a recipe's name and ingredients. Its id and position are kept."""
    if body.id is not None and body.id != recipe_id:
        raise IdMismatchError(recipe_id, body.id)
    record = store.update(RecordId(recipe_id), body.to_fields())
    logger.info(
        f"Updated recipe {recipe_id}",
        extra={"resource": RESOURCE, "record_id": recipe_id},
    )
    return RecipeResponse.from_record(record)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: str, store: RecipeStore = Depends(get_recipe_store),
):
    """Delete a recipe. Its id is never reissued."""
    store.delete(RecordId(recipe_id))
    logger.info(
        f"Deleted recipe {recipe_id}",
        extra={"resource": RESOURCE, "record_id": recipe_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
