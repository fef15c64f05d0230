from __future__ import annotations

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QWidget


def center_on_screen(widget: QWidget) -> None:
    """
    Ставить вікно по центру основного екрана.
    Без екрана (напр. offscreen без геометрії) нічого не робить.
    """
    screen = widget.screen() or QGuiApplication.primaryScreen()
    if screen is None:
        return

    frame = widget.frameGeometry()
    frame.moveCenter(screen.availableGeometry().center())
    widget.move(frame.topLeft())
