"""Household registry: beneficiary households keyed by household number."""

import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from relieftrack.models.enums import ActionType, EntityType
from relieftrack.models.household import Household
from relieftrack.schemas.activity_log import (
    ActivityLogCreate,
    HouseholdCreatedDetails,
    HouseholdDeletedDetails,
    HouseholdUpdatedDetails,
)
from relieftrack.schemas.household import (
    HouseholdCreate,
    HouseholdFilter,
    HouseholdSummary,
    HouseholdUpdate,
)
from relieftrack.services.activity_log import ActivityLogService
from relieftrack.services.errors import DuplicateHouseholdNumber, NotFoundError, StoreError

logger = logging.getLogger(__name__)


def household_label(household: Household) -> str:
    """Name a household the way activity rows show it."""
    return f"{household.household_number} - {household.head_of_family}"


class HouseholdService:
    """Service for household registration."""

    def __init__(self, db: Session, activity: ActivityLogService):
        self.db = db
        self.activity = activity

    def _filtered(self, filters: HouseholdFilter | None):
        filters = filters or HouseholdFilter()
        query = self.db.query(Household)
        if filters.purok is not None:
            query = query.filter(Household.purok == filters.purok.value)
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    Household.household_number.ilike(pattern),
                    Household.head_of_family.ilike(pattern),
                )
            )
        return query

    def list_households(self, filters: HouseholdFilter | None = None) -> list[Household]:
        """List households, most recently registered first."""
        return (
            self._filtered(filters)
            .order_by(Household.registered_at.desc(), Household.id.desc())
            .all()
        )

    def summary(self, filters: HouseholdFilter | None = None) -> HouseholdSummary:
        """Count households and family members matching the filters."""
        total_households, total_members = (
            self._filtered(filters)
            .with_entities(
                func.count(Household.id),
                func.coalesce(func.sum(Household.family_members), 0),
            )
            .one()
        )
        return HouseholdSummary(
            total_households=total_households, total_family_members=total_members
        )

    def get_household(self, household_id: int) -> Household:
        household = self.db.query(Household).filter(Household.id == household_id).first()
        if not household:
            raise NotFoundError("Household not found")
        return household

    def _check_unique_number(self, household_number: str, exclude_id: int | None = None) -> None:
        """Fail if another household already uses ``household_number``."""
        if self._number_taken(household_number, exclude_id):
            raise DuplicateHouseholdNumber(household_number)

    def _commit(self, household_number: str, exclude_id: int | None = None) -> None:
        # A concurrent registration that passed the pre-check trips the unique index here
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self._number_taken(household_number, exclude_id):
                raise DuplicateHouseholdNumber(household_number) from e
            raise StoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e

    def _number_taken(self, household_number: str, exclude_id: int | None = None) -> bool:
        query = self.db.query(Household.id).filter(Household.household_number == household_number)
        if exclude_id is not None:
            query = query.filter(Household.id != exclude_id)
        return query.first() is not None

    def create_household(self, data: HouseholdCreate, performed_by: str) -> Household:
        """Register a household."""
        self._check_unique_number(data.household_number)

        household = Household(
            household_number=data.household_number,
            head_of_family=data.head_of_family,
            purok=data.purok.value,
            address=data.address,
            contact_number=data.contact_number or None,
            family_members=data.family_members,
        )
        self.db.add(household)
        self._commit(data.household_number)
        self.db.refresh(household)
        logger.info(f"Registered household {household.id} ({household.household_number})")

        self.activity.append(
            ActivityLogCreate(
                action_type=ActionType.CREATE,
                entity_type=EntityType.HOUSEHOLD,
                entity_id=household.id,
                entity_name=household_label(household),
                performed_by=performed_by,
                details=HouseholdCreatedDetails(
                    purok=household.purok, family_members=household.family_members
                ),
            )
        )
        return household

    def update_household(
        self, household_id: int, data: HouseholdUpdate, performed_by: str
    ) -> Household:
        """Update a household. Only fields present in ``data`` are changed."""
        household = self.get_household(household_id)
        changes = data.model_dump(exclude_unset=True)

        new_number = changes.get("household_number")
        if new_number is not None:
            self._check_unique_number(new_number, exclude_id=household.id)

        for field, value in changes.items():
            if field == "contact_number":
                household.contact_number = value or None
            elif value is not None:
                setattr(household, field, value.value if field == "purok" else value)

        self._commit(household.household_number, exclude_id=household.id)
        self.db.refresh(household)
        logger.info(f"Updated household {household.id} ({household.household_number})")

        self.activity.append(
            ActivityLogCreate(
                action_type=ActionType.UPDATE,
                entity_type=EntityType.HOUSEHOLD,
                entity_id=household.id,
                entity_name=household_label(household),
                performed_by=performed_by,
                details=HouseholdUpdatedDetails(purok=household.purok),
            )
        )
        return household

    def delete_household(self, household_id: int, performed_by: str) -> None:
        """Remove a household together with its distributions."""
        household = self.get_household(household_id)
        label = household_label(household)
        purok = household.purok

        self.db.delete(household)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(str(e)) from e
        logger.info(f"Deleted household {household_id} ({label})")

        self.activity.append(
            ActivityLogCreate(
                action_type=ActionType.DELETE,
                entity_type=EntityType.HOUSEHOLD,
                entity_id=household_id,
                entity_name=label,
                performed_by=performed_by,
                details=HouseholdDeletedDetails(purok=purok),
            )
        )
