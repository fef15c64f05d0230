from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QPushButton,
    QStyle,
    QWidget,
)


class ControlsPanel(QWidget):
    """
    Нижня панель з кнопками:
    - «Watch» – запустити (імітацію) перегляду;
    - «Details» – показати опис фільму.
    Панель нічого не знає про вибір, лише надсилає запити.
    """

    # --- сигнали, які ловить MainWindow ---
    request_play = Signal()
    request_details = Signal()

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._init_ui()

    # ---------- побудова інтерфейсу ----------

    def _init_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.addStretch()

        style = self.style()
        self.btn_play = QPushButton(
            style.standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation),
            "Watch",
        )
        self.btn_details = QPushButton(
            style.standardIcon(QStyle.StandardPixmap.SP_MessageBoxQuestion),
            "Details",
        )

        layout.addWidget(self.btn_play)
        layout.addWidget(self.btn_details)
        layout.addStretch()

        self._connect_signals()

    def _connect_signals(self) -> None:
        self.btn_play.clicked.connect(self.request_play.emit)
        self.btn_details.clicked.connect(self.request_details.emit)
