from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MovieRecord:
    """
    Один фільм у каталозі.
    title    – назва, що показується у списку.
    synopsis – короткий опис для діалогу «Деталі».
    poster   – непрозорий дескриптор зображення (QPixmap у застосунку).
    """
    title: str
    synopsis: str
    poster: Any = field(default=None, compare=False, repr=False)
