"""스택 처리: 스택 슬롯 전개, 스택 수량 보정, 스택 분할"""

from __future__ import annotations

import copy
import logging
import uuid
from typing import Callable

from .models import ItemInstance, ItemTemplate, StackCount

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def new_instance_id() -> str:
    return str(uuid.uuid4())


def expand_stack_slots(
    template: ItemTemplate,
    parent_id: str,
    id_factory: IdFactory = new_instance_id,
) -> list[ItemInstance]:
    """스택 슬롯마다 자식 인스턴스 1개 생성 (탄약 상자 → 탄약).

    tpl은 슬롯 filters의 첫 항목, 수량은 슬롯 max_count.
    filters가 비어 있는 슬롯은 경고 로그 후 건너뛴다.
    """
    created: list[ItemInstance] = []
    for slot in template.stack_slots:
        if not slot.filters:
            logger.warning(
                "Stack slot %s of %s has no allowed items, skipping",
                slot.name,
                template.tpl,
            )
            continue

        created.append(
            ItemInstance(
                instance_id=id_factory(),
                tpl=slot.filters[0],
                parent_id=parent_id,
                slot_id=slot.name,
                location=slot.location,
                wear=StackCount(count=slot.max_count),
            )
        )
    return created


def normalize_stack_count(item: ItemInstance) -> ItemInstance:
    """스택 수량 미설정 시 1로 설정. 이미 설정된 값(0 포함)은 유지.

    다른 마모 변형(내구도 등)을 가진 아이템은 그대로 둔다 (수량은 암묵적으로 1).
    같은 인스턴스를 수정해서 반환.
    """
    if item.wear is None:
        item.wear = StackCount(count=1)
    elif isinstance(item.wear, StackCount) and item.wear.count is None:
        item.wear.count = 1
    return item


def get_stack_count(item: ItemInstance) -> int:
    """스택 수량. 미설정이면 1."""
    if isinstance(item.wear, StackCount) and item.wear.count is not None:
        return item.wear.count
    return 1


def is_stackable(template: ItemTemplate) -> bool:
    return template.stack_max_size > 1


def split_stack(
    item: ItemInstance,
    template: ItemTemplate,
    id_factory: IdFactory = new_instance_id,
) -> list[ItemInstance]:
    """stack_max_size를 넘는 스택을 여러 스택으로 분할.

    넘지 않으면 복사본 1개. 분할된 스택은 새 id를 받고 부모/슬롯은 유지.
    """
    count = get_stack_count(item)
    max_size = max(template.stack_max_size, 1)

    if count <= max_size:
        return [copy.deepcopy(item)]

    stacks: list[ItemInstance] = []
    remaining = count
    while remaining > 0:
        amount = min(remaining, max_size)
        stack = copy.deepcopy(item)
        stack.instance_id = id_factory()
        stack.wear = StackCount(count=amount)
        stacks.append(stack)
        remaining -= amount

    logger.debug("Split %s (x%d) into %d stacks", item.instance_id, count, len(stacks))
    return stacks
