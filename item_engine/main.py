"""Application bootstrap: logging, tables, seed data, ItemService."""

from sqlalchemy.orm import Session

from item_engine.config import settings
from item_engine.core.item.registry import TemplateRegistry
from item_engine.core.logging import get_logger, setup_logging
from item_engine.db.database import SessionLocal, engine, init_db
from item_engine.services.item_service import ItemService

logger = get_logger(__name__)


def create_item_service(db: Session, seed_prices: bool = True) -> ItemService:
    """설정 기반 ItemService 생성.

    SEED_TEMPLATES_PATH → registry, SEED_PRICES_PATH → 가격 테이블,
    ITEM_BLACKLIST → validator.
    """
    registry = TemplateRegistry()
    registry.load_from_json(settings.SEED_TEMPLATES_PATH)

    service = ItemService(db, registry, blacklist=settings.ITEM_BLACKLIST)
    if seed_prices:
        service.load_prices_from_json(settings.SEED_PRICES_PATH)
    return service


def main() -> None:
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.DEBUG)

    logger.info("Creating database tables...")
    init_db(engine)

    db = SessionLocal()
    try:
        service = create_item_service(db)
        synced = service.sync_templates_to_db()
        logger.info("Item engine ready (%d templates synced)", synced)
    finally:
        db.close()


if __name__ == "__main__":
    main()
