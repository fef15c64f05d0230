import sys

from PySide6.QtWidgets import QApplication

from moviebox.config import Settings
from moviebox.models import default_catalog
from moviebox.ui.main_window import MainWindow
from moviebox.ui.posters import create_placeholder_poster
from moviebox.ui.window_center import center_on_screen
from moviebox.utils.logger import get_logger, setup_logging


def main() -> None:
    """
    Точка входу в застосунок.
    Відповідає тільки за:
    - налаштування й логування;
    - створення QApplication;
    - побудову каталогу і показ головного вікна.
    """
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logger = get_logger(__name__)

    app = QApplication(sys.argv)

    # постери можна малювати лише після створення QApplication
    catalog = default_catalog(create_placeholder_poster)
    logger.info("Catalog loaded: %d movies", len(catalog))

    window = MainWindow(catalog, title=settings.window_title)
    window.resize(settings.window_width, settings.window_height)
    center_on_screen(window)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
