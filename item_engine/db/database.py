"""Database engine and session configuration."""

from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from item_engine.config import settings
from item_engine.db.models import Base


def make_engine(url: str, echo: bool = False) -> Engine:
    """SQLite는 스레드 검사를 끈다 (세션을 요청 스레드 밖에서 닫을 수 있음)."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, echo=echo)


def make_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=bind, autocommit=False, autoflush=False)


def init_db(bind: Engine) -> None:
    """item_templates / handbook_prices / market_prices 테이블 생성."""
    Base.metadata.create_all(bind=bind)


engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)
SessionLocal = make_session_factory(engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and ensure it is closed after use."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
