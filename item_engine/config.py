"""Application configuration loaded from environment variables and .env file."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    List values (ITEM_BLACKLIST) are given as JSON arrays in the environment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DATABASE_URL: str = "sqlite:///./items.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Seed data
    SEED_TEMPLATES_PATH: Path = DATA_DIR / "seed_items.json"
    SEED_PRICES_PATH: Path = DATA_DIR / "seed_prices.json"

    # 수동 관리되는 문제 아이템 (거래/사용 불가)
    ITEM_BLACKLIST: list[str] = [
        "6087e570b998180e9f76dc24",  # Superfors DB 2020 Dead Blow Hammer
        "5e997f0b86f7741ac73993e2",  # Sledgehammer
    ]


settings = Settings()
