from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtWidgets import (
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from moviebox.models import Catalog
from moviebox.services import Notification, SelectionService
from moviebox.utils.logger import get_logger
from .controls_panel import ControlsPanel
from .movie_list import MovieListView
from .notifications import show_notification

logger = get_logger(__name__)

Notifier = Callable[[QWidget, Notification], None]


class MainWindow(QMainWindow):
    """
    Головне вікно програми.
    По центру: список фільмів з постерами.
    Знизу: кнопки «Watch» і «Details».

    Каталог передається ззовні; вікно його не створює і не змінює.
    """

    def __init__(
        self,
        catalog: Catalog,
        title: str = "Netflix",
        notifier: Optional[Notifier] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(title)

        self._selection = SelectionService(catalog)
        self._notify: Notifier = notifier or show_notification

        self._init_ui(catalog)
        self._connect_signals()

    @property
    def selection(self) -> SelectionService:
        return self._selection

    def _init_ui(self, catalog: Catalog) -> None:
        central = QWidget(self)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)

        # QListView сам дає прокрутку
        self.movie_list = MovieListView(catalog, central)
        root_layout.addWidget(self.movie_list, stretch=1)

        self.controls = ControlsPanel(central)
        root_layout.addWidget(self.controls)

        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        """
        Підписуємося на сигнали від списку і панелі кнопок.
        """
        self.movie_list.movie_selected.connect(self._selection.select)
        self.movie_list.selection_cleared.connect(self._selection.clear)

        self.controls.request_play.connect(self._on_play)
        self.controls.request_details.connect(self._on_details)

    # ----------- обробники сигналів -----------

    def _on_play(self) -> None:
        self._show(self._selection.on_play_requested())

    def _on_details(self) -> None:
        self._show(self._selection.on_details_requested())

    def _show(self, notification: Notification) -> None:
        logger.info(
            "Notification [%s] %s: %s",
            notification.kind.value,
            notification.title,
            notification.message,
        )
        # вибір після закриття діалогу не скидається
        self._notify(self, notification)
