"""인벤토리 트리: 평면 리스트의 parent_id 링크로 하위 아이템 계산"""

import logging
from typing import Iterator

from .models import ItemInstance

logger = logging.getLogger(__name__)


def build_children_index(items: list[ItemInstance]) -> dict[str, list[str]]:
    """parent_id → 자식 instance_id 목록 (리스트 순서 유지)."""
    index: dict[str, list[str]] = {}
    for item in items:
        if item.parent_id is not None:
            index.setdefault(item.parent_id, []).append(item.instance_id)
    return index


def find_descendants(items: list[ItemInstance], root_id: str) -> list[str]:
    """root_id의 모든 하위 아이템 + root_id 자신.

    후위 순회: 자식이 부모보다 먼저, root_id는 마지막.
    형제는 items의 순서를 따른다.
    root_id가 items에 없어도 [root_id] 반환.
    순환 parent 링크는 이미 방문한 id에서 끊는다.
    """
    index = build_children_index(items)

    result: list[str] = []
    visited = {root_id}
    stack: list[tuple[str, Iterator[str]]] = [
        (root_id, iter(index.get(root_id, ())))
    ]

    while stack:
        node_id, children = stack[-1]
        child_id = next(children, None)
        if child_id is None:
            stack.pop()
            result.append(node_id)
            continue

        if child_id in visited:
            logger.warning(
                "Cycle in item tree: %s already visited (root=%s)", child_id, root_id
            )
            continue

        visited.add(child_id)
        stack.append((child_id, iter(index.get(child_id, ()))))

    return result


def find_descendant_items(
    items: list[ItemInstance], root_id: str
) -> list[ItemInstance]:
    """find_descendants()와 같은 순서의 인스턴스 목록. items에 없는 id는 제외."""
    by_id = {item.instance_id: item for item in items}
    return [by_id[i] for i in find_descendants(items, root_id) if i in by_id]
