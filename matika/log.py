"""
log.py
======================

ロギングの初期化。

- コンソールへは logging.basicConfig で出力
- ファイルへは RotatingFileHandler（5MB × 3 世代）で出力

Streamlit はスクリプトを何度も再実行するので、
setup_logging() は何度呼ばれてもハンドラを重複登録しない。
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from .config import AppConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_LOGGER = "matika"


def setup_logging(config: AppConfig) -> logging.Logger:
    """matika パッケージ用のロガーを設定して返す。"""
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(config.log_level)

    log_path = os.path.abspath(config.log_path)
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == log_path:
            return logger

    os.makedirs(os.path.dirname(log_path), exist_ok=True)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    return logger
