from __future__ import annotations

from typing import Any, Optional

from PySide6.QtCore import (
    QAbstractListModel,
    QItemSelection,
    QModelIndex,
    QRect,
    QSize,
    Qt,
    Signal,
)
from PySide6.QtGui import QColor, QPalette, QPixmap
from PySide6.QtWidgets import (
    QAbstractItemView,
    QListView,
    QStyle,
    QStyledItemDelegate,
    QStyleOptionViewItem,
)

from moviebox.models import Catalog
from moviebox.services import RowPalette, render_row
from moviebox.services.row_renderer import ROW_PADDING
from moviebox.ui.posters import POSTER_HEIGHT, POSTER_WIDTH

MOVIE_ROLE = Qt.ItemDataRole.UserRole + 1


class CatalogListModel(QAbstractListModel):
    """
    Модель лише для читання поверх Catalog.
    Рядок моделі = позиція фільму в каталозі.
    """

    def __init__(self, catalog: Catalog, parent=None) -> None:
        super().__init__(parent)
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def rowCount(self, parent=QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._catalog)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._catalog):
            return None

        record = self._catalog[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return record.title
        if role == Qt.ItemDataRole.DecorationRole:
            return record.poster
        if role == Qt.ItemDataRole.ToolTipRole:
            return record.synopsis
        if role == MOVIE_ROLE:
            return record
        return None


def palette_to_row_palette(palette: QPalette) -> RowPalette:
    return RowPalette(
        background=palette.color(QPalette.ColorRole.Base).name(),
        foreground=palette.color(QPalette.ColorRole.Text).name(),
        selection_background=palette.color(QPalette.ColorRole.Highlight).name(),
        selection_foreground=palette.color(
            QPalette.ColorRole.HighlightedText
        ).name(),
    )


class MovieRowDelegate(QStyledItemDelegate):
    """
    Адаптер між Qt і render_row: саму «розмітку» рядка визначає
    render_row, делегат лише малює результат.
    """

    def paint(self, painter, option: QStyleOptionViewItem, index) -> None:
        record = index.data(MOVIE_ROLE)
        if record is None:
            super().paint(painter, option, index)
            return

        is_selected = bool(option.state & QStyle.StateFlag.State_Selected)
        visual = render_row(record, is_selected, palette_to_row_palette(option.palette))

        painter.save()
        painter.fillRect(option.rect, QColor(visual.background))

        content = option.rect.adjusted(
            visual.padding, visual.padding, -visual.padding, -visual.padding
        )
        text_left = content.left()
        if isinstance(visual.icon, QPixmap) and not visual.icon.isNull():
            painter.drawPixmap(content.topLeft(), visual.icon)
            text_left += visual.icon.width() + visual.padding

        text_rect = QRect(
            text_left, content.top(), content.right() - text_left, content.height()
        )
        painter.setPen(QColor(visual.foreground))
        painter.drawText(
            text_rect,
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            visual.text,
        )
        painter.restore()

    def sizeHint(self, option, index) -> QSize:  # noqa: N802
        base = super().sizeHint(option, index)
        record = index.data(MOVIE_ROLE)
        poster = record.poster if record is not None else None
        if isinstance(poster, QPixmap) and not poster.isNull():
            height = poster.height()
        else:
            height = POSTER_HEIGHT
        padding = 2 * ROW_PADDING
        return QSize(max(base.width(), POSTER_WIDTH + padding), height + padding)


class MovieListView(QListView):
    """
    Список фільмів з одиничним вибором.
    Зміни вибору перетворюються на сигнали з номером рядка.
    """

    movie_selected = Signal(int)
    selection_cleared = Signal()

    def __init__(self, catalog: Catalog, parent=None) -> None:
        super().__init__(parent)
        self._model = CatalogListModel(catalog, self)
        self.setModel(self._model)
        self.setItemDelegate(MovieRowDelegate(self))
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setUniformItemSizes(True)

        self.selectionModel().selectionChanged.connect(self._on_selection_changed)

    @property
    def catalog_model(self) -> CatalogListModel:
        return self._model

    def displayed_titles(self) -> list:
        """Назви у тому порядку, в якому їх бачить користувач."""
        return [
            self._model.data(self._model.index(row, 0))
            for row in range(self._model.rowCount())
        ]

    def selected_row(self) -> Optional[int]:
        rows = self.selectionModel().selectedRows()
        if not rows:
            return None
        return rows[0].row()

    def _on_selection_changed(
        self, selected: QItemSelection, deselected: QItemSelection
    ) -> None:
        row = self.selected_row()
        if row is None:
            self.selection_cleared.emit()
        else:
            self.movie_selected.emit(row)
