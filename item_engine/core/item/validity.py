"""아이템 유효성 판정: 거래/사용 가능한 템플릿인지"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .base_classes import TRADEABLE_BASE_CLASSES
from .models import NodeType
from .pricing import PriceResolver
from .registry import TemplateRegistry

logger = logging.getLogger(__name__)


class ItemValidator:
    """템플릿 조회 + 가격 + 베이스 클래스 정책 + 블랙리스트 결합."""

    def __init__(
        self,
        registry: TemplateRegistry,
        prices: PriceResolver,
        blacklist: Iterable[str] = (),
        default_allowed: Iterable[str] = TRADEABLE_BASE_CLASSES,
    ):
        self._registry = registry
        self._prices = prices
        self._blacklist = frozenset(blacklist)
        self._default_allowed = frozenset(default_allowed)

    def is_valid_item(
        self,
        tpl: str,
        allowed_base_classes: Optional[Iterable[str]] = None,
    ) -> bool:
        """순서대로 판정, 하나라도 걸리면 False.

        1. 카탈로그에 없음
        2. 퀘스트 아이템 / 베이스 클래스 노드
        3. 베이스 클래스 체인이 allowed_base_classes와 겹치지 않음
           (None이면 일반 거래 대상 목록 사용)
        4. 가격 0
        5. 블랙리스트
        """
        found, template = self._registry.get_item(tpl)
        if not found:
            return False

        if template.quest_item or template.node_type != NodeType.ITEM:
            return False

        if allowed_base_classes is None:
            allowed_base_classes = self._default_allowed
        if not self._registry.is_of_baseclasses(tpl, allowed_base_classes):
            return False

        if self._prices.price(tpl) == 0:
            return False

        if tpl in self._blacklist:
            logger.debug("Item %s is blacklisted", tpl)
            return False

        return True

    def is_of_baseclass(self, tpl: str, base_class: str) -> bool:
        return self._registry.is_of_baseclass(tpl, base_class)

    def is_of_baseclasses(self, tpl: str, base_classes: Iterable[str]) -> bool:
        return self._registry.is_of_baseclasses(tpl, base_classes)
