"""Inventory API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from relieftrack.api.dependencies import get_actor, get_inventory_service
from relieftrack.models.enums import ItemCategory
from relieftrack.schemas.inventory import (
    InventoryFilter,
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)
from relieftrack.services.inventory_service import InventoryService

router = APIRouter(prefix="/api/v1/inventory", tags=["inventory"])


@router.get("", response_model=list[InventoryItemResponse])
def list_inventory(
    service: Annotated[InventoryService, Depends(get_inventory_service)],
    category: ItemCategory | None = None,
    search: str | None = None,
    low_stock_only: bool = False,
    in_stock_only: bool = False,
):
    """List inventory items.

    ``in_stock_only`` returns the items that can still be distributed.
    """
    return service.list_items(
        InventoryFilter(
            category=category,
            search=search,
            low_stock_only=low_stock_only,
            in_stock_only=in_stock_only,
        )
    )


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    item_data: InventoryItemCreate,
    service: Annotated[InventoryService, Depends(get_inventory_service)],
    actor: Annotated[str, Depends(get_actor)],
):
    """Add a relief supply item."""
    return service.create_item(item_data, performed_by=actor)


@router.get("/{item_id}", response_model=InventoryItemResponse)
def get_inventory_item(
    item_id: int,
    service: Annotated[InventoryService, Depends(get_inventory_service)],
):
    """Get a specific inventory item."""
    return service.get_item(item_id)


@router.put("/{item_id}", response_model=InventoryItemResponse)
def update_inventory_item(
    item_id: int,
    item_data: InventoryItemUpdate,
    service: Annotated[InventoryService, Depends(get_inventory_service)],
    actor: Annotated[str, Depends(get_actor)],
):
    """Update an inventory item."""
    return service.update_item(item_id, item_data, performed_by=actor)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(
    item_id: int,
    service: Annotated[InventoryService, Depends(get_inventory_service)],
    actor: Annotated[str, Depends(get_actor)],
):
    """Remove an inventory item."""
    service.delete_item(item_id, performed_by=actor)
