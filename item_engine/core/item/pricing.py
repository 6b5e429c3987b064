"""가격 계산: 정적(핸드북) 가격 + 동적(시장) 가격 결합"""

import logging
from typing import Callable, Iterable, Optional

logger = logging.getLogger(__name__)

PriceLookup = Callable[[str], Optional[float]]


class PriceResolver:
    """
    static_lookup: 핸드북 고정가 조회. 없으면 None.
    dynamic_lookup: 시장 시세 조회. 없으면 None.

    Core는 가격 저장소를 모르므로, 호출자가 조회 함수를 주입.
    조회 실패는 항상 0으로 해석한다 (0이 아닌 대체값 없음).
    """

    def __init__(self, static_lookup: PriceLookup, dynamic_lookup: PriceLookup):
        self._static_lookup = static_lookup
        self._dynamic_lookup = dynamic_lookup

    def static_price(self, tpl: str) -> float:
        """핸드북 가격. 1 미만이거나 없으면 0."""
        price = self._static_lookup(tpl)
        if price is None or price < 1:
            return 0
        return price

    def dynamic_price(self, tpl: str) -> float:
        """시장 가격. 0 이하이거나 없으면 0."""
        price = self._dynamic_lookup(tpl)
        if price is None or price <= 0:
            return 0
        return price

    def price(self, tpl: str) -> float:
        """정적 가격 우선, 없으면 동적 가격, 둘 다 없으면 0."""
        static = self.static_price(tpl)
        if static >= 1:
            return static

        dynamic = self.dynamic_price(tpl)
        if dynamic:
            return dynamic

        logger.debug("No price found for %s", tpl)
        return 0

    def max_price(self, tpl: str) -> float:
        """정적/동적 중 큰 값."""
        return max(self.static_price(tpl), self.dynamic_price(tpl))

    def prices_total(self, tpls: Iterable[str]) -> float:
        """tpl 목록의 price() 합계."""
        return sum(self.price(tpl) for tpl in tpls)
