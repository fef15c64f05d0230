"""Налаштування логування для всього застосунку.

Використання:
    from moviebox.utils.logger import get_logger
    logger = get_logger(__name__)
"""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    # basicConfig не чіпає вже налаштований root, рівень ставимо явно
    logging.getLogger().setLevel(numeric)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
