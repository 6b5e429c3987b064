"""SQLAlchemy declarative base and item tables."""

from sqlalchemy import Boolean, Float, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import JSON


class Base(DeclarativeBase):
    """Base class for all database models."""


class ItemTemplateModel(Base):
    """카탈로그 템플릿 사본 (registry → DB 동기화)"""

    __tablename__ = "item_templates"

    tpl: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    parent: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    node_type: Mapped[str] = mapped_column(String, nullable=False, default="Item")
    quest_item: Mapped[bool] = mapped_column(Boolean, default=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)


class HandbookPriceModel(Base):
    """핸드북 고정가 (정적 가격)"""

    __tablename__ = "handbook_prices"

    tpl: Mapped[str] = mapped_column(String, primary_key=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)


class MarketPriceModel(Base):
    """시장 시세 (동적 가격)"""

    __tablename__ = "market_prices"

    tpl: Mapped[str] = mapped_column(String, primary_key=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
