"""아이템 도메인 모델 (DB 무관)"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class NodeType(str, Enum):
    ITEM = "Item"
    NODE = "Node"  # 베이스 클래스 자체 (실제 아이템 아님)


@dataclass(frozen=True)
class StackSlot:
    """컨테이너 슬롯 정의. 탄약 상자의 "cartridges" 등."""

    name: str  # slot_id로 복사됨
    max_count: int
    filters: tuple[str, ...] = ()  # 허용 tpl, 순서 유지. 첫 항목이 생성 대상
    location: int = 0


@dataclass(frozen=True)
class ItemTemplate:
    """아이템 원형: 불변. seed_items.json에서 로드."""

    tpl: str
    name: str = ""
    parent: Optional[str] = None  # 직속 베이스 클래스 tpl
    node_type: NodeType = NodeType.ITEM
    quest_item: bool = False

    # 스택
    stack_max_size: int = 1
    stack_slots: tuple[StackSlot, ...] = ()

    # 품질 계산용 최대치 (None = 해당 없음)
    max_durability: Optional[float] = None
    max_hp_resource: Optional[float] = None  # 의약품
    max_resource: Optional[float] = None  # 연료, 음식/음료
    max_repair_resource: Optional[float] = None  # 수리 키트
    maximum_number_of_usage: Optional[int] = None  # 열쇠

    # 모델링하지 않은 나머지 속성
    props: dict[str, Any] = field(default_factory=dict)


# ── WearState 변형 ───────────────────────────────────────────


@dataclass
class Durability:
    """무기/방어구 내구도"""

    current: float
    maximum: Optional[float] = None


@dataclass
class Resource:
    """연료 등 잔량형 소모품"""

    remaining: float
    consumed: float = 0


@dataclass
class FoodOrDrink:
    hp_remaining: float


@dataclass
class MedKit:
    hp_remaining: float


@dataclass
class RepairKit:
    resource_remaining: float


@dataclass
class Key:
    uses_remaining: int


@dataclass
class StackCount:
    count: Optional[int] = None  # None = 미설정


WearState = Union[
    Durability, Resource, FoodOrDrink, MedKit, RepairKit, Key, StackCount
]


@dataclass
class ItemInstance:
    """배치된 아이템 개체. 부모 포인터로 평면 리스트 안에서 트리를 이룬다."""

    instance_id: str
    tpl: str  # ItemTemplate.tpl 참조

    # 위치
    parent_id: Optional[str] = None
    slot_id: Optional[str] = None
    location: Optional[int] = None

    # 상태 (변형은 최대 하나, None = 신품)
    wear: Optional[WearState] = None
