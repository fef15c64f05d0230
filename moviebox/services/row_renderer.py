from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from moviebox.models import MovieRecord

ROW_PADDING = 5


@dataclass(frozen=True)
class RowPalette:
    """Кольори списку (назви кольорів, напр. '#308cc6')."""
    background: str
    foreground: str
    selection_background: str
    selection_foreground: str


@dataclass(frozen=True)
class RowVisual:
    """
    Що треба намалювати для одного рядка.
    icon – той самий дескриптор постера, що й у MovieRecord.
    """
    text: str
    background: str
    foreground: str
    icon: Any = field(default=None, compare=False)
    padding: int = ROW_PADDING


def render_row(
    record: MovieRecord, is_selected: bool, palette: RowPalette
) -> RowVisual:
    """
    Чиста функція: назва + постер, кольори залежно від вибору.
    Однакові аргументи завжди дають однаковий результат.
    """
    if is_selected:
        background = palette.selection_background
        foreground = palette.selection_foreground
    else:
        background = palette.background
        foreground = palette.foreground

    return RowVisual(
        text=record.title,
        background=background,
        foreground=foreground,
        icon=record.poster,
    )
