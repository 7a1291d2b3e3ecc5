"""
日志配置

SDK 内部统一使用 loguru，导入时默认关闭 shop_union 的日志输出，
由调用方通过 setup_logging() 或 logger.enable("shop_union") 打开。
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from shop_union.config import settings

LOGGER_NAME = "shop_union"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    打开 SDK 日志并安装输出

    Args:
        level: 日志级别，默认取 settings.log_level
        log_file: 日志文件路径，默认取 settings.log_file，为空时只输出到 stderr
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(
        sys.stderr,
        format=settings.log_format,
        level=level,
        colorize=settings.log_colorize,
    )
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=settings.log_format,
            level=level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="zip",
            encoding="utf-8",
        )
    logger.enable(LOGGER_NAME)
    logger.info(f"日志系统初始化完成 - Level: {level}")
