"""아이템 시스템 Core: 순수 Python, DB 무관"""

from .base_classes import BaseClass
from .models import (
    Durability,
    FoodOrDrink,
    ItemInstance,
    ItemTemplate,
    Key,
    MedKit,
    NodeType,
    RepairKit,
    Resource,
    StackCount,
    StackSlot,
    WearState,
)
from .pricing import PriceResolver
from .registry import TemplateRegistry
from .validity import ItemValidator

__all__ = [
    "BaseClass",
    "Durability",
    "FoodOrDrink",
    "ItemInstance",
    "ItemTemplate",
    "Key",
    "MedKit",
    "NodeType",
    "RepairKit",
    "Resource",
    "StackCount",
    "StackSlot",
    "WearState",
    "PriceResolver",
    "TemplateRegistry",
    "ItemValidator",
]
