"""아이템 Service: Core↔DB 연결

Core 컴포넌트(가격, 품질, 유효성, 트리, 스택)를 조립하고
가격 조회를 DB 테이블에 연결한다.
"""

import copy
import dataclasses
import json
from pathlib import Path
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from item_engine.core.item.base_classes import ARMORED_BASE_CLASSES
from item_engine.core.item.models import ItemInstance, ItemTemplate
from item_engine.core.item.pricing import PriceResolver
from item_engine.core.item.quality import get_quality_modifier
from item_engine.core.item.registry import TemplateRegistry
from item_engine.core.item.stack import (
    IdFactory,
    expand_stack_slots,
    new_instance_id,
    normalize_stack_count,
    split_stack,
)
from item_engine.core.item.tree import find_descendant_items, find_descendants
from item_engine.core.item.validity import ItemValidator
from item_engine.core.logging import get_logger
from item_engine.db.models import (
    HandbookPriceModel,
    ItemTemplateModel,
    MarketPriceModel,
)

logger = get_logger(__name__)

_TEMPLATE_COLUMNS = {"tpl", "name", "parent", "node_type", "quest_item"}


def _check_price(kind: str, tpl: str, price: float) -> None:
    if price < 0:
        raise ValueError(f"Negative {kind} price for {tpl}: {price}")


class ItemService:
    """아이템 조회 + 가격 + 품질 + 인벤토리 헬퍼"""

    def __init__(
        self,
        db: Session,
        registry: TemplateRegistry,
        blacklist: Iterable[str] = (),
        id_factory: IdFactory = new_instance_id,
    ):
        self._db = db
        self._registry = registry
        self._id_factory = id_factory
        self.prices = PriceResolver(self._get_handbook_price, self._get_market_price)
        self.validator = ItemValidator(registry, self.prices, blacklist=blacklist)

    # === 템플릿 조회 ===

    def get_item(self, tpl: str) -> tuple[bool, Optional[ItemTemplate]]:
        return self._registry.get_item(tpl)

    def is_item_in_db(self, tpl: str) -> bool:
        found, _ = self.get_item(tpl)
        return found

    def get_items(self) -> list[ItemTemplate]:
        """전체 템플릿 (깊은 복사본)."""
        return self._registry.get_all()

    def get_item_name(self, tpl: str) -> Optional[str]:
        return self._registry.get_item_name(tpl)

    def sync_templates_to_db(self) -> int:
        """Registry → DB 동기화. 반환: 새로 저장된 수량."""
        count = 0
        for template in self._registry.get_all():
            existing = (
                self._db.query(ItemTemplateModel)
                .filter(ItemTemplateModel.tpl == template.tpl)
                .first()
            )
            if existing is None:
                self._db.add(self._template_to_orm(template))
                count += 1
        self._db.commit()
        logger.info("Synced %d templates to DB", count)
        return count

    # === 가격 ===

    def get_static_item_price(self, tpl: str) -> float:
        return self.prices.static_price(tpl)

    def get_dynamic_item_price(self, tpl: str) -> float:
        return self.prices.dynamic_price(tpl)

    def get_item_price(self, tpl: str) -> float:
        return self.prices.price(tpl)

    def get_item_max_price(self, tpl: str) -> float:
        return self.prices.max_price(tpl)

    def set_handbook_price(self, tpl: str, price: float) -> None:
        _check_price("handbook", tpl, price)
        self._db.merge(HandbookPriceModel(tpl=tpl, price=price))
        self._db.commit()

    def set_market_price(self, tpl: str, price: float) -> None:
        _check_price("market", tpl, price)
        self._db.merge(MarketPriceModel(tpl=tpl, price=price))
        self._db.commit()

    def load_prices_from_json(self, path: str | Path) -> int:
        """seed_prices.json 로드 ({"handbook": {...}, "market": {...}}).
        반환: 저장된 가격 수.
        음수 가격이 하나라도 있으면 ValueError, 아무것도 저장하지 않는다.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw: dict[str, dict[str, float]] = json.load(f)

        rows: list[HandbookPriceModel | MarketPriceModel] = []
        for tpl, price in raw.get("handbook", {}).items():
            _check_price("handbook", tpl, float(price))
            rows.append(HandbookPriceModel(tpl=tpl, price=float(price)))
        for tpl, price in raw.get("market", {}).items():
            _check_price("market", tpl, float(price))
            rows.append(MarketPriceModel(tpl=tpl, price=float(price)))

        for row in rows:
            self._db.merge(row)
        self._db.commit()
        count = len(rows)

        logger.info("Loaded %d prices from %s", count, path)
        return count

    # === 유효성 ===

    def is_valid_item(
        self, tpl: str, allowed_base_classes: Optional[Iterable[str]] = None
    ) -> bool:
        return self.validator.is_valid_item(tpl, allowed_base_classes)

    def is_of_baseclass(self, tpl: str, base_class: str) -> bool:
        return self.validator.is_of_baseclass(tpl, base_class)

    def is_of_baseclasses(self, tpl: str, base_classes: Iterable[str]) -> bool:
        return self.validator.is_of_baseclasses(tpl, base_classes)

    # === 품질 ===

    def get_item_quality_modifier(self, item: ItemInstance) -> float:
        """템플릿 조회 + 방어구 여부 판정 후 품질 계수 계산."""
        template = self._registry.get(item.tpl)
        is_armor = template is not None and self._registry.is_of_baseclasses(
            item.tpl, ARMORED_BASE_CLASSES
        )
        return get_quality_modifier(item, template, is_armor)

    # === 인벤토리 ===

    def find_and_return_children_by_items(
        self, items: list[ItemInstance], root_id: str
    ) -> list[str]:
        return find_descendants(items, root_id)

    def find_and_return_children_as_items(
        self, items: list[ItemInstance], root_id: str
    ) -> list[ItemInstance]:
        return find_descendant_items(items, root_id)

    def generate_items_from_stack_slot(
        self, template: ItemTemplate, parent_id: str
    ) -> list[ItemInstance]:
        return expand_stack_slots(template, parent_id, self._id_factory)

    def fix_item_stack_count(self, item: ItemInstance) -> ItemInstance:
        return normalize_stack_count(item)

    def split_stack(self, item: ItemInstance) -> list[ItemInstance]:
        """템플릿의 stack_max_size 기준 분할. 템플릿이 없으면 그대로 1개."""
        template = self._registry.get(item.tpl)
        if template is None:
            logger.warning(
                "Cannot split %s: unknown template %s", item.instance_id, item.tpl
            )
            return [copy.deepcopy(item)]
        return split_stack(item, template, self._id_factory)

    # === 가격 조회 (DB) ===

    def _get_handbook_price(self, tpl: str) -> float | None:
        row = (
            self._db.query(HandbookPriceModel)
            .filter(HandbookPriceModel.tpl == tpl)
            .first()
        )
        return row.price if row else None

    def _get_market_price(self, tpl: str) -> float | None:
        row = (
            self._db.query(MarketPriceModel)
            .filter(MarketPriceModel.tpl == tpl)
            .first()
        )
        return row.price if row else None

    # === Core → ORM ===

    def _template_to_orm(self, core: ItemTemplate) -> ItemTemplateModel:
        """Core → ORM (sync용). 컬럼 외 필드는 data JSON에 저장."""
        data = {
            key: value
            for key, value in dataclasses.asdict(core).items()
            if key not in _TEMPLATE_COLUMNS
        }
        return ItemTemplateModel(
            tpl=core.tpl,
            name=core.name,
            parent=core.parent,
            node_type=core.node_type.value,
            quest_item=core.quest_item,
            data=data,
        )
