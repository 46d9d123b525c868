"""Food item routes"""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fridge.api.dependencies import get_controller
from fridge.logic.freshness.analysis import describe_item, compute_freshness_summary
from fridge.logic.inventory.controller import FridgeController
from fridge.utilities.validators import FoodItemInput

router = APIRouter(prefix="/api/food-items", tags=["Food"])
logger = logging.getLogger(__name__)


@router.get("")
def list_food_items(
    today: Optional[date] = Query(default=None, description="Reference date for freshness (defaults to today)"),
    controller: FridgeController = Depends(get_controller),
):
    """All food items in insertion order, with derived freshness."""
    items = [describe_item(i, today) for i in controller.state.food_items]
    return {"items": items, "count": len(items)}


@router.get("/summary")
def food_summary(
    today: Optional[date] = Query(default=None),
    controller: FridgeController = Depends(get_controller),
):
    return compute_freshness_summary(controller.state.food_items, today)


@router.post("", status_code=status.HTTP_201_CREATED)
def add_food_item(payload: FoodItemInput, controller: FridgeController = Depends(get_controller)):
    item = controller.add_food_item(payload.name, payload.expiration_date)
    if item is None:
        raise HTTPException(status_code=422, detail="Food name cannot be empty")
    return describe_item(item)


@router.delete("/{item_id}")
def delete_food_item(item_id: str, controller: FridgeController = Depends(get_controller)):
    if not controller.remove_food_item(item_id):
        raise HTTPException(status_code=404, detail="Food item not found")
    return {"success": True, "count": len(controller.state.food_items)}
