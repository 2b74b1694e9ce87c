"""Enums for model fields."""

from enum import StrEnum


class ItemCategory(StrEnum):
    """Relief supply categories."""

    FOOD_PACK = "food_pack"
    HYGIENE_KIT = "hygiene_kit"
    MEDICAL = "medical"
    CLOTHING = "clothing"
    OTHER = "other"


class Purok(StrEnum):
    """Sub-district groupings used to classify household location."""

    PUROK_1 = "Purok 1"
    PUROK_2 = "Purok 2"
    PUROK_3 = "Purok 3"
    PUROK_4 = "Purok 4"
    PUROK_5 = "Purok 5"
    PUROK_6 = "Purok 6"


class ActionType(StrEnum):
    """Kinds of mutation recorded in the activity log."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class EntityType(StrEnum):
    """Entities whose mutations are recorded in the activity log."""

    INVENTORY = "inventory"
    HOUSEHOLD = "household"
    DISTRIBUTION = "distribution"


class StockStatus(StrEnum):
    """Derived stock level of an inventory item."""

    LOW_STOCK = "Low Stock"
    IN_STOCK = "In Stock"

    @classmethod
    def classify(cls, quantity: int, threshold: int) -> "StockStatus":
        """Classify a quantity against its low-stock threshold."""
        return cls.LOW_STOCK if quantity < threshold else cls.IN_STOCK
