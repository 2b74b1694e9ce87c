"""Distribution API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from relieftrack.api.dependencies import get_distribution_ledger
from relieftrack.models.enums import Purok
from relieftrack.schemas.distribution import (
    DistributionCreate,
    DistributionFilter,
    DistributionResponse,
)
from relieftrack.services.distribution_ledger import DistributionLedger

router = APIRouter(prefix="/api/v1/distributions", tags=["distributions"])


@router.get("", response_model=list[DistributionResponse])
def list_distributions(
    ledger: Annotated[DistributionLedger, Depends(get_distribution_ledger)],
    purok: Purok | None = None,
    search: str | None = None,
):
    """List distributions with household and item details."""
    return ledger.list_distributions(DistributionFilter(purok=purok, search=search))


@router.post("", response_model=DistributionResponse, status_code=status.HTTP_201_CREATED)
def record_distribution(
    distribution_data: DistributionCreate,
    ledger: Annotated[DistributionLedger, Depends(get_distribution_ledger)],
):
    """Record a distribution and take the quantity out of inventory."""
    return ledger.record_distribution(
        household_id=distribution_data.household_id,
        inventory_id=distribution_data.inventory_id,
        quantity=distribution_data.quantity_distributed,
        distributed_by=distribution_data.distributed_by,
        notes=distribution_data.notes,
    )
