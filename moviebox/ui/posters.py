from __future__ import annotations

from PySide6.QtGui import QColor, QPainter, QPixmap

POSTER_WIDTH = 80
POSTER_HEIGHT = 120

POSTER_BACKGROUND = "#404040"
POSTER_FOREGROUND = "#ffffff"


def create_placeholder_poster(
    width: int = POSTER_WIDTH,
    height: int = POSTER_HEIGHT,
) -> QPixmap:
    """
    Темно-сірий прямокутник-заглушка з білою рамкою і підписом «Poster».
    Потрібен запущений QGuiApplication.
    """
    pix = QPixmap(width, height)
    pix.fill(QColor(POSTER_BACKGROUND))

    painter = QPainter(pix)
    painter.setPen(QColor(POSTER_FOREGROUND))
    # рамка з відступом 5 px від країв
    painter.drawRect(5, 5, width - 10, height - 10)
    painter.drawText(15, height // 2, "Poster")
    painter.end()

    return pix
