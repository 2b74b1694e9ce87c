"""Activity log schemas.

``details`` is a closed set of payloads, one per entity/action pair, tagged by
``kind`` ("<entity_type>.<action_type>") so the stored JSON can be validated
on the way in and out.
"""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from relieftrack.models.enums import ActionType, EntityType


class InventoryCreatedDetails(BaseModel):
    kind: Literal["inventory.create"] = "inventory.create"
    category: str
    quantity: int


class InventoryUpdatedDetails(BaseModel):
    kind: Literal["inventory.update"] = "inventory.update"
    previous_quantity: int
    new_quantity: int


class InventoryDeletedDetails(BaseModel):
    kind: Literal["inventory.delete"] = "inventory.delete"
    category: str


class HouseholdCreatedDetails(BaseModel):
    kind: Literal["household.create"] = "household.create"
    purok: str
    family_members: int


class HouseholdUpdatedDetails(BaseModel):
    kind: Literal["household.update"] = "household.update"
    purok: str


class HouseholdDeletedDetails(BaseModel):
    kind: Literal["household.delete"] = "household.delete"
    purok: str


class DistributionCreatedDetails(BaseModel):
    kind: Literal["distribution.create"] = "distribution.create"
    quantity: int
    item: str
    household: str
    purok: str


ActivityDetails = Annotated[
    InventoryCreatedDetails
    | InventoryUpdatedDetails
    | InventoryDeletedDetails
    | HouseholdCreatedDetails
    | HouseholdUpdatedDetails
    | HouseholdDeletedDetails
    | DistributionCreatedDetails,
    Field(discriminator="kind"),
]


class ActivityLogCreate(BaseModel):
    """Entry appended to the activity log."""

    action_type: ActionType
    entity_type: EntityType
    entity_id: int | None = None
    entity_name: str = Field(..., max_length=500)
    performed_by: str = Field(..., max_length=255)
    details: ActivityDetails | None = None

    @model_validator(mode="after")
    def details_match_entry(self) -> "ActivityLogCreate":
        """Reject a payload tagged for a different entity or action."""
        expected = f"{self.entity_type}.{self.action_type}"
        if self.details is not None and self.details.kind != expected:
            raise ValueError(f"details of kind {self.details.kind!r} do not match {expected!r}")
        return self


class ActivityLogFilter(BaseModel):
    """Query filters for listing the activity log."""

    entity_type: EntityType | None = None
    action_type: ActionType | None = None
    search: str | None = None


class ActivityLogResponse(BaseModel):
    """Activity log response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    action_type: ActionType
    entity_type: EntityType
    entity_id: int | None
    entity_name: str
    performed_by: str
    details: ActivityDetails | None
    created_at: datetime


class ActivityCounts(BaseModel):
    """Number of activity rows per action type."""

    create: int = 0
    update: int = 0
    delete: int = 0
    total: int = 0
