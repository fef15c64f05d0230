"""
Конфігурація застосунку.

Змінні оточення читаються один раз (з урахуванням .env),
решта коду отримує готовий об'єкт Settings.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    window_title: str = "Netflix"
    window_width: int = 800
    window_height: int = 600
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Зчитує налаштування з MOVIEBOX_*.
        Некоректні значення – ValueError, без тихих підстановок.
        """
        width = _read_int("MOVIEBOX_WINDOW_WIDTH", cls.window_width)
        height = _read_int("MOVIEBOX_WINDOW_HEIGHT", cls.window_height)
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Розмір вікна має бути додатним, отримано {width}x{height}"
            )

        log_level = os.getenv("MOVIEBOX_LOG_LEVEL", cls.log_level).strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"Невідомий рівень логування: {log_level!r}")

        return cls(
            window_title=os.getenv("MOVIEBOX_WINDOW_TITLE", cls.window_title),
            window_width=width,
            window_height=height,
            log_level=log_level,
        )


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} має бути цілим числом, отримано {raw!r}") from exc
