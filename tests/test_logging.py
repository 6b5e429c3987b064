"""로깅 설정 테스트"""

import logging

from item_engine.core.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_sql_logging_quiet_by_default(self) -> None:
        setup_logging("INFO")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_sql_echo(self) -> None:
        setup_logging("DEBUG", sql_echo=True)
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
        logging.getLogger("sqlalchemy.engine").setLevel(logging.NOTSET)

    def test_get_logger(self) -> None:
        assert get_logger("item_engine.x").name == "item_engine.x"
