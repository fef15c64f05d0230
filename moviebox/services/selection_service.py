from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from moviebox.models import Catalog, MovieRecord
from moviebox.utils.logger import get_logger

logger = get_logger(__name__)

PLAYBACK_TITLE = "Playback"
PLAYBACK_MESSAGE = "Starting movie: {title}"
NO_SELECTION_TITLE = "No movie selected"
NO_SELECTION_MESSAGE = "Select a movie from the list."


class SelectionState(Enum):
    NO_SELECTION = "no_selection"
    ITEM_SELECTED = "item_selected"


class NotificationKind(Enum):
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    """
    Модальне повідомлення для користувача.
    kind    – INFO або WARNING (впливає лише на іконку діалогу).
    title   – заголовок вікна.
    message – текст.
    """
    kind: NotificationKind
    title: str
    message: str


NO_SELECTION_NOTIFICATION = Notification(
    kind=NotificationKind.WARNING,
    title=NO_SELECTION_TITLE,
    message=NO_SELECTION_MESSAGE,
)


class SelectionService:
    """
    Стан вибору у списку фільмів.
    Тримає не більше одного вибраного запису і формує повідомлення
    для дій «Дивитися» та «Деталі». Нічого не знає про Qt.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._selected_row: Optional[int] = None

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def state(self) -> SelectionState:
        if self._selected_row is None:
            return SelectionState.NO_SELECTION
        return SelectionState.ITEM_SELECTED

    @property
    def selected_row(self) -> Optional[int]:
        return self._selected_row

    @property
    def selected(self) -> Optional[MovieRecord]:
        if self._selected_row is None:
            return None
        return self._catalog[self._selected_row]

    # ---------- переходи ----------

    def select(self, row: int) -> MovieRecord:
        """
        Вибирає рядок row. Попередній вибір просто замінюється.
        """
        if not 0 <= row < len(self._catalog):
            raise IndexError(
                f"Рядок {row} поза межами каталогу з {len(self._catalog)} фільмів"
            )
        self._selected_row = row
        record = self._catalog[row]
        logger.debug("Selected row %d: %s", row, record.title)
        return record

    def clear(self) -> None:
        if self._selected_row is not None:
            logger.debug("Selection cleared")
        self._selected_row = None

    # ---------- дії ----------

    def on_play_requested(self) -> Notification:
        record = self.selected
        if record is None:
            return NO_SELECTION_NOTIFICATION
        # справжнього відтворення немає – лише повідомлення
        return Notification(
            kind=NotificationKind.INFO,
            title=PLAYBACK_TITLE,
            message=PLAYBACK_MESSAGE.format(title=record.title),
        )

    def on_details_requested(self) -> Notification:
        record = self.selected
        if record is None:
            return NO_SELECTION_NOTIFICATION
        return Notification(
            kind=NotificationKind.INFO,
            title=record.title,
            message=record.synopsis,
        )
