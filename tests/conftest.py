"""Shared test fixtures."""

import itertools

import pytest
from sqlalchemy.orm import Session

from item_engine.config import settings
from item_engine.core.item.registry import TemplateRegistry
from item_engine.db.database import init_db, make_engine, make_session_factory
from item_engine.services.item_service import ItemService


@pytest.fixture()
def registry() -> TemplateRegistry:
    """seed_items.json이 로드된 Registry"""
    reg = TemplateRegistry()
    reg.load_from_json(settings.SEED_TEMPLATES_PATH)
    return reg


@pytest.fixture()
def id_factory():
    """결정적 instance_id 생성기 ("id-1", "id-2", ...)"""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture()
def db_session() -> Session:
    """테스트마다 새 인메모리 SQLite 세션."""
    engine = make_engine("sqlite:///:memory:")
    init_db(engine)
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def item_service(db_session, registry, id_factory) -> ItemService:
    """seed 템플릿 + seed 가격 + 설정 블랙리스트로 구성된 ItemService"""
    service = ItemService(
        db_session,
        registry,
        blacklist=settings.ITEM_BLACKLIST,
        id_factory=id_factory,
    )
    service.load_prices_from_json(settings.SEED_PRICES_PATH)
    return service
