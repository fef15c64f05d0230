from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from moviebox.services import Notification, NotificationKind


def show_notification(parent: QWidget, notification: Notification) -> None:
    """
    Показує модальне вікно повідомлення і чекає, доки його закриють.
    """
    if notification.kind is NotificationKind.WARNING:
        QMessageBox.warning(parent, notification.title, notification.message)
    else:
        QMessageBox.information(parent, notification.title, notification.message)
