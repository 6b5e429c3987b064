"""아이템 템플릿 저장소: JSON 로드 + 동적 등록 + 베이스 클래스 조회"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from .models import ItemTemplate, NodeType, StackSlot

logger = logging.getLogger(__name__)


def _optional_number(raw: dict, key: str) -> Optional[float]:
    value = raw.get(key)
    return None if value is None else float(value)


def template_from_dict(raw: dict) -> ItemTemplate:
    """JSON 객체 → ItemTemplate.

    stack_slots는 list → tuple[StackSlot] 변환.
    node_type은 문자열 → NodeType enum 변환.
    KeyError/ValueError/TypeError는 호출자에게 전파.
    """
    slots = tuple(
        StackSlot(
            name=s["name"],
            max_count=int(s["max_count"]),
            filters=tuple(s.get("filters", [])),
            location=int(s.get("location", 0)),
        )
        for s in raw.get("stack_slots", [])
    )
    usage = raw.get("maximum_number_of_usage")
    return ItemTemplate(
        tpl=raw["tpl"],
        name=raw.get("name", ""),
        parent=raw.get("parent"),
        node_type=NodeType(raw.get("node_type", NodeType.ITEM.value)),
        quest_item=bool(raw.get("quest_item", False)),
        stack_max_size=int(raw.get("stack_max_size", 1)),
        stack_slots=slots,
        max_durability=_optional_number(raw, "max_durability"),
        max_hp_resource=_optional_number(raw, "max_hp_resource"),
        max_resource=_optional_number(raw, "max_resource"),
        max_repair_resource=_optional_number(raw, "max_repair_resource"),
        maximum_number_of_usage=None if usage is None else int(usage),
        props=dict(raw.get("props", {})),
    )


class TemplateRegistry:
    """
    아이템 템플릿 저장소 (카탈로그).
    초기 데이터(JSON) + 동적 등록 템플릿 관리.
    외부로 내보내는 컬렉션은 항상 깊은 복사본.
    """

    def __init__(self) -> None:
        self._templates: dict[str, ItemTemplate] = {}

    def load_from_json(self, path: str | Path) -> int:
        """seed_items.json 로드. 반환: 로드된 수량.

        형식이 잘못된 항목은 경고 로그 후 건너뛴다.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict] = json.load(f)

        count = 0
        for raw in raw_list:
            if not isinstance(raw, dict):
                logger.warning("Skipping non-object template entry: %r", raw)
                continue
            try:
                template = template_from_dict(raw)
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to load template: %s (%s)", raw.get("tpl", "?"), e
                )
                continue
            self._templates[template.tpl] = template
            count += 1

        logger.info("Loaded %d templates from %s", count, path)
        return count

    def register(self, template: ItemTemplate) -> None:
        """동적 템플릿 등록.
        이미 존재하는 tpl이면 경고 로그 후 덮어쓴다.
        """
        if template.tpl in self._templates:
            logger.warning("Overwriting existing template: %s", template.tpl)
        self._templates[template.tpl] = template

    def get(self, tpl: str) -> Optional[ItemTemplate]:
        """O(1) 조회. 없으면 None."""
        return self._templates.get(tpl)

    def get_item(self, tpl: str) -> tuple[bool, Optional[ItemTemplate]]:
        """(존재 여부, 템플릿). 없으면 (False, None)."""
        template = self._templates.get(tpl)
        return template is not None, template

    def contains(self, tpl: str) -> bool:
        return tpl in self._templates

    def get_all(self) -> list[ItemTemplate]:
        """전체 템플릿의 깊은 복사본.

        반환값을 수정해도 저장소나 다른 조회 결과에 영향이 없다.
        """
        return copy.deepcopy(list(self._templates.values()))

    def get_item_name(self, tpl: str) -> Optional[str]:
        template = self._templates.get(tpl)
        return template.name if template else None

    def ancestors(self, tpl: str) -> list[str]:
        """tpl의 베이스 클래스 체인 (직속 parent부터 루트까지).

        카탈로그 밖의 parent는 체인에 넣고 거기서 멈춘다.
        순환 parent 링크는 이미 본 tpl에서 중단.
        """
        chain: list[str] = []
        seen = {tpl}
        template = self._templates.get(tpl)
        parent = template.parent if template else None
        while parent is not None and parent not in seen:
            chain.append(parent)
            seen.add(parent)
            node = self._templates.get(parent)
            parent = node.parent if node else None
        if parent is not None and parent in seen:
            logger.warning("Cyclic base class chain at %s (tpl=%s)", parent, tpl)
        return chain

    def is_of_baseclass(self, tpl: str, base_class: str) -> bool:
        return base_class in self.ancestors(tpl)

    def is_of_baseclasses(self, tpl: str, base_classes: Iterable[str]) -> bool:
        """base_classes 중 하나라도 체인에 있으면 True."""
        return not set(self.ancestors(tpl)).isdisjoint(base_classes)

    def count(self) -> int:
        """등록된 템플릿 수."""
        return len(self._templates)
