"""Tests for the loguru setup helper."""

import pytest
from loguru import logger

from shop_union.utils.logging import LOGGER_NAME, setup_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.disable(LOGGER_NAME)


def test_file_sink_receives_records(tmp_path, restore_logger):
    log_file = tmp_path / "logs" / "sdk.log"
    setup_logging(level="DEBUG", log_file=str(log_file))
    logger.debug("[Probe] hello")
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "日志系统初始化完成 - Level: DEBUG" in content
    assert "[Probe] hello" in content


def test_level_filters_debug(tmp_path, restore_logger):
    log_file = tmp_path / "sdk.log"
    setup_logging(level="WARNING", log_file=str(log_file))
    logger.info("not written")
    logger.warning("written")
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "not written" not in content
    assert "written" in content
