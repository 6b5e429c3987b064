"""템플릿 Registry 테스트: JSON 로드, 조회, 깊은 복사, 베이스 클래스 체인"""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import pytest

from item_engine.config import settings
from item_engine.core.item.base_classes import BaseClass
from item_engine.core.item.models import ItemTemplate, NodeType
from item_engine.core.item.registry import TemplateRegistry, template_from_dict

GRIZZLY = "590c657e86f77412b013051d"
PACA = "5648a7494bdc2d9d488b4583"
AMMO_PACK = "57372c89245977685d4159b1"


class TestLoad:
    def test_load_seed(self) -> None:
        registry = TemplateRegistry()
        count = registry.load_from_json(settings.SEED_TEMPLATES_PATH)
        assert count == registry.count()
        assert count > 30

    def test_malformed_entries_skipped(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "items.json"
        path.write_text(
            json.dumps(
                [
                    {"tpl": "ok", "name": "Fine"},
                    {"name": "no tpl"},
                    {"tpl": "bad_type", "node_type": "Weird"},
                    {"tpl": "bad_slot", "stack_slots": [{"name": "s"}]},
                    "garbage",
                    42,
                ]
            ),
            encoding="utf-8",
        )
        registry = TemplateRegistry()
        assert registry.load_from_json(path) == 1
        assert registry.contains("ok")
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 5

    def test_stack_slots_parsed(self, registry: TemplateRegistry) -> None:
        slot = registry.get(AMMO_PACK).stack_slots[0]
        assert slot.name == "cartridges"
        assert slot.max_count == 30
        assert isinstance(slot.filters, tuple)

    def test_template_from_dict_defaults(self) -> None:
        template = template_from_dict({"tpl": "x"})
        assert template.node_type == NodeType.ITEM
        assert template.stack_max_size == 1
        assert template.max_durability is None
        assert template.stack_slots == ()


class TestLookup:
    def test_get_item_found(self, registry: TemplateRegistry) -> None:
        found, template = registry.get_item(GRIZZLY)
        assert found is True
        assert template is registry.get(GRIZZLY)

    def test_get_item_missing(self, registry: TemplateRegistry) -> None:
        assert registry.get_item("non-existent-item") == (False, None)

    def test_contains(self, registry: TemplateRegistry) -> None:
        assert registry.contains(GRIZZLY) is True
        assert registry.contains("non-existent-item") is False

    def test_item_name(self, registry: TemplateRegistry) -> None:
        assert registry.get_item_name(GRIZZLY) == "Grizzly medical kit"
        assert registry.get_item_name("non-existent-item") is None

    def test_register_overwrites_with_warning(self, caplog) -> None:
        registry = TemplateRegistry()
        registry.register(ItemTemplate(tpl="x", name="old"))
        registry.register(ItemTemplate(tpl="x", name="new"))
        assert registry.get("x").name == "new"
        assert any("Overwriting" in r.getMessage() for r in caplog.records)

    def test_template_frozen(self, registry: TemplateRegistry) -> None:
        with pytest.raises(AttributeError):
            registry.get(GRIZZLY).name = "changed"  # type: ignore[misc]


class TestGetAllIsolation:
    def test_returns_new_list(self, registry: TemplateRegistry) -> None:
        first = registry.get_all()
        first.clear()
        assert len(registry.get_all()) == registry.count()

    def test_copies_are_detached_from_registry(self, registry: TemplateRegistry) -> None:
        copies = {t.tpl: t for t in registry.get_all()}
        assert copies[GRIZZLY] == registry.get(GRIZZLY)
        assert copies[GRIZZLY] is not registry.get(GRIZZLY)

    def test_mutating_copy_does_not_leak(self, registry: TemplateRegistry) -> None:
        first = {t.tpl: t for t in registry.get_all()}
        first[PACA].props["armorClass"] = 6
        first[GRIZZLY] = dataclasses.replace(first[GRIZZLY], name="modified")

        second = {t.tpl: t for t in registry.get_all()}
        assert second[PACA].props["armorClass"] == 2
        assert second[GRIZZLY].name == "Grizzly medical kit"
        assert registry.get(PACA).props["armorClass"] == 2


class TestAncestors:
    def test_chain(self, registry: TemplateRegistry) -> None:
        assert registry.ancestors(GRIZZLY) == [
            BaseClass.MEDKIT.value,
            BaseClass.MEDS.value,
            BaseClass.ITEM.value,
        ]

    def test_root_has_no_ancestors(self, registry: TemplateRegistry) -> None:
        assert registry.ancestors(BaseClass.ITEM.value) == []

    def test_unknown(self, registry: TemplateRegistry) -> None:
        assert registry.ancestors("non-existent-item") == []

    def test_parent_outside_catalog(self) -> None:
        registry = TemplateRegistry()
        registry.register(ItemTemplate(tpl="a", parent="ghost"))
        assert registry.ancestors("a") == ["ghost"]

    def test_cycle_terminates(self, caplog) -> None:
        registry = TemplateRegistry()
        registry.register(ItemTemplate(tpl="a", parent="b"))
        registry.register(ItemTemplate(tpl="b", parent="a"))
        assert registry.ancestors("a") == ["b"]
        assert any(r.levelno == logging.WARNING for r in caplog.records)
