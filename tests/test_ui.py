from PySide6.QtCore import Qt

from moviebox.models import Catalog, MovieRecord, default_catalog
from moviebox.services import NO_SELECTION_NOTIFICATION, NotificationKind
from moviebox.ui.main_window import MainWindow
from moviebox.ui.movie_list import MOVIE_ROLE, CatalogListModel
from moviebox.ui.posters import create_placeholder_poster


def _select(window, row):
    model = window.movie_list.catalog_model
    window.movie_list.setCurrentIndex(model.index(row, 0))


def test_placeholder_poster_size(qapp):
    poster = create_placeholder_poster()
    assert poster.width() == 80
    assert poster.height() == 120


def test_model_roles(qapp, two_movies):
    model = CatalogListModel(two_movies)
    index = model.index(1, 0)

    assert model.rowCount() == 2
    assert model.data(index) == "Stranger Things"
    assert model.data(index, Qt.ItemDataRole.ToolTipRole) == two_movies[1].synopsis
    assert model.data(index, MOVIE_ROLE) is two_movies[1]


def test_empty_catalog_renders(qapp, notifier):
    window = MainWindow(Catalog(), notifier=notifier)
    window.show()
    qapp.processEvents()

    assert window.movie_list.displayed_titles() == []
    window.controls.btn_play.click()
    assert notifier.last == NO_SELECTION_NOTIFICATION
    window.close()


def test_rows_shown_in_catalog_order(qapp, notifier):
    catalog = default_catalog(create_placeholder_poster)
    window = MainWindow(catalog, notifier=notifier)
    window.resize(800, 600)
    window.show()
    qapp.processEvents()

    assert window.movie_list.displayed_titles() == catalog.titles()
    window.close()


def test_buttons_without_selection_warn(qapp, two_movies, notifier):
    window = MainWindow(two_movies, notifier=notifier)

    window.controls.btn_play.click()
    window.controls.btn_details.click()

    assert notifier.shown == [NO_SELECTION_NOTIFICATION, NO_SELECTION_NOTIFICATION]


def test_watch_selected_movie(qapp, two_movies, notifier):
    window = MainWindow(two_movies, notifier=notifier)
    _select(window, 0)

    window.controls.btn_play.click()

    assert notifier.last.kind is NotificationKind.INFO
    assert notifier.last.title == "Playback"
    assert notifier.last.message == "Starting movie: Inception"


def test_details_selected_movie(qapp, two_movies, notifier):
    window = MainWindow(two_movies, notifier=notifier)
    _select(window, 1)

    window.controls.btn_details.click()

    assert notifier.last.title == "Stranger Things"
    assert notifier.last.message == two_movies[1].synopsis


def test_latest_click_wins(qapp, two_movies, notifier):
    window = MainWindow(two_movies, notifier=notifier)
    _select(window, 0)
    _select(window, 1)

    assert window.movie_list.selected_row() == 1
    assert window.selection.selected_row == 1
    window.controls.btn_play.click()
    assert notifier.last.message == "Starting movie: Stranger Things"


def test_selection_kept_after_notification(qapp, two_movies, notifier):
    window = MainWindow(two_movies, notifier=notifier)
    _select(window, 0)

    window.controls.btn_details.click()
    window.controls.btn_play.click()

    assert window.selection.selected_row == 0
    assert [n.kind for n in notifier.shown] == [NotificationKind.INFO] * 2


def test_duplicate_titles_selected_by_position(qapp, notifier):
    catalog = Catalog([MovieRecord("Dark", "first"), MovieRecord("Dark", "second")])
    window = MainWindow(catalog, notifier=notifier)
    _select(window, 1)

    window.controls.btn_details.click()
    assert notifier.last.message == "second"


def test_window_title(qapp, two_movies):
    assert MainWindow(two_movies).windowTitle() == "Netflix"
    assert MainWindow(two_movies, title="Movies").windowTitle() == "Movies"
