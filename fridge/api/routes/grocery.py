"""Grocery list routes"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from fridge.api.dependencies import get_controller
from fridge.logic.freshness.analysis import describe_item
from fridge.logic.inventory.controller import FridgeController
from fridge.utilities.errors import OutOfRangeError
from fridge.utilities.validators import (
    GroceryItemInput, GroceryBulkDeleteInput, PromoteGroceryInput
)

router = APIRouter(prefix="/api/grocery-items", tags=["Grocery"])
logger = logging.getLogger(__name__)


def _listing(groceries):
    return {"items": groceries, "count": len(groceries)}


@router.get("")
def list_grocery_items(controller: FridgeController = Depends(get_controller)):
    return _listing(list(controller.state.grocery_items))


@router.post("", status_code=status.HTTP_201_CREATED)
def add_grocery_item(payload: GroceryItemInput, controller: FridgeController = Depends(get_controller)):
    return _listing(controller.add_grocery_item(payload.name))


@router.post("/bulk-delete")
def bulk_delete_grocery_items(payload: GroceryBulkDeleteInput, controller: FridgeController = Depends(get_controller)):
    """Delete several entries by position. Any invalid position rejects the whole request."""
    try:
        groceries = controller.remove_grocery_items_at(payload.positions)
    except OutOfRangeError as e:
        logger.info("Rejected grocery bulk delete: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return _listing(groceries)


@router.post("/promote", status_code=status.HTTP_201_CREATED)
def promote_grocery_item(payload: PromoteGroceryInput, controller: FridgeController = Depends(get_controller)):
    """Mark a grocery entry as bought: it becomes a tracked food item."""
    item, groceries = controller.promote_grocery_item(payload.name, payload.expiration_date)
    if item is None:
        raise HTTPException(status_code=422, detail="Grocery item cannot be empty")
    return {"item": describe_item(item), "grocery_items": _listing(groceries)}


@router.delete("/{name:path}")
def delete_grocery_item(name: str, controller: FridgeController = Depends(get_controller)):
    """Remove the first entry with this exact name; unknown names leave the list as is."""
    return _listing(controller.remove_grocery_item(name))
