from .selection_service import (
    NO_SELECTION_NOTIFICATION,
    Notification,
    NotificationKind,
    SelectionService,
    SelectionState,
)
from .row_renderer import RowPalette, RowVisual, render_row

__all__ = [
    "NO_SELECTION_NOTIFICATION",
    "Notification",
    "NotificationKind",
    "SelectionService",
    "SelectionState",
    "RowPalette",
    "RowVisual",
    "render_row",
]
