"""품질 계수: 마모 상태(WearState) → 가치 할인 배율 [0.01, 1]

신품(wear 없음) 또는 품질과 무관한 변형(StackCount)은 1.
필요한 최대치가 없거나 0 이하면 에러 로그 후 INVALID_QUALITY_DEFAULT.
계산 결과가 0 이하면 MIN_QUALITY, 1 초과(최대치를 넘는 마모 값)면 PRISTINE_QUALITY.
"""

import logging
import math
from typing import Optional

from .models import (
    Durability,
    FoodOrDrink,
    ItemInstance,
    ItemTemplate,
    Key,
    MedKit,
    RepairKit,
    Resource,
)

logger = logging.getLogger(__name__)

PRISTINE_QUALITY = 1.0
MIN_QUALITY = 0.01

# 데이터 손상 시의 기본값. fail-open: 아이템 가치를 0으로 만들지 않는다.
INVALID_QUALITY_DEFAULT = 1.0


def _invalid_quality(tpl: str, reason: str) -> float:
    logger.error(
        "Unable to calculate quality for %s: %s. Defaulting to %s",
        tpl,
        reason,
        INVALID_QUALITY_DEFAULT,
    )
    return INVALID_QUALITY_DEFAULT


def _has_maximum(value: Optional[float]) -> bool:
    return value is not None and value > 0


def get_durability_quality(
    template: ItemTemplate,
    durability: Durability,
    is_armor: bool,
) -> float:
    """내구도 품질 (클램프 전 값).

    방어구: current / wear.maximum (템플릿 최대치 무시).
    무기: sqrt(current / 최대치), 최대치는 템플릿 우선, 없으면 wear.maximum.
    """
    if is_armor:
        if not _has_maximum(durability.maximum):
            return _invalid_quality(
                template.tpl, f"armor max durability is {durability.maximum!r}"
            )
        return max(durability.current / durability.maximum, 0)

    if _has_maximum(template.max_durability):
        effective_max = template.max_durability
    else:
        effective_max = durability.maximum

    if not _has_maximum(effective_max):
        return _invalid_quality(
            template.tpl,
            f"weapon max durability is {effective_max!r} "
            f"(template={template.max_durability!r}, wear={durability.maximum!r})",
        )

    return math.sqrt(max(durability.current / effective_max, 0))


def _ratio(
    template: ItemTemplate,
    current: float,
    maximum: Optional[float],
    field: str,
) -> float:
    if not _has_maximum(maximum):
        return _invalid_quality(template.tpl, f"{field} is {maximum!r}")
    return current / maximum


def get_quality_modifier(
    item: ItemInstance,
    template: Optional[ItemTemplate],
    is_armor: bool = False,
) -> float:
    """아이템 품질 계수 [0.01, 1].

    template: item.tpl의 템플릿. 조회 실패 시 None.
    is_armor: 템플릿이 방어구 계열 베이스 클래스인지 (내구도 공식 선택).
    """
    wear = item.wear
    if wear is None:
        return PRISTINE_QUALITY

    if template is None:
        logger.warning(
            "Template %s not found for item %s, quality defaults to 1",
            item.tpl,
            item.instance_id,
        )
        return PRISTINE_QUALITY

    if isinstance(wear, Durability):
        result = get_durability_quality(template, wear, is_armor)
    elif isinstance(wear, MedKit):
        result = _ratio(
            template, wear.hp_remaining, template.max_hp_resource, "max_hp_resource"
        )
    elif isinstance(wear, FoodOrDrink):
        result = _ratio(
            template, wear.hp_remaining, template.max_resource, "max_resource"
        )
    elif isinstance(wear, Key):
        result = _ratio(
            template,
            wear.uses_remaining,
            template.maximum_number_of_usage,
            "maximum_number_of_usage",
        )
    elif isinstance(wear, Resource):
        result = _ratio(
            template, wear.remaining, template.max_resource, "max_resource"
        )
    elif isinstance(wear, RepairKit):
        result = _ratio(
            template,
            wear.resource_remaining,
            template.max_repair_resource,
            "max_repair_resource",
        )
    else:
        return PRISTINE_QUALITY

    if result <= 0:
        return MIN_QUALITY
    if result > PRISTINE_QUALITY:
        logger.warning(
            "Wear of %s exceeds template maximum (quality %.3f), capping at 1",
            item.instance_id,
            result,
        )
        return PRISTINE_QUALITY
    return result
