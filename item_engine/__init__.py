"""item_engine: 아이템 카탈로그 도메인 엔진"""

__version__ = "0.1.0"
