import os

import pytest

# без дисплея Qt малює в пам'ять
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from moviebox.models import Catalog, MovieRecord  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def two_movies():
    return Catalog(
        [
            MovieRecord(
                "Inception",
                "A mind-bending thriller about dreams within dreams.",
            ),
            MovieRecord(
                "Stranger Things",
                "A group of kids uncover supernatural mysteries in their town.",
            ),
        ]
    )


class RecordingNotifier:
    """Замість QMessageBox просто запам'ятовує повідомлення."""

    def __init__(self):
        self.shown = []

    def __call__(self, parent, notification):
        self.shown.append(notification)

    @property
    def last(self):
        return self.shown[-1]


@pytest.fixture
def notifier():
    return RecordingNotifier()
