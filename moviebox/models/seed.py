from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from .catalog import Catalog
from .movie import MovieRecord


# (назва, опис) у порядку показу
DEFAULT_MOVIES: List[Tuple[str, str]] = [
    (
        "Inception",
        "A mind-bending thriller about dreams within dreams.",
    ),
    (
        "Stranger Things",
        "A group of kids uncover supernatural mysteries in their town.",
    ),
    (
        "The Witcher",
        "A monster hunter struggles to find his place in a turbulent world.",
    ),
    (
        "Interstellar",
        "Explorers travel through a wormhole in space to save humanity.",
    ),
    (
        "Dark",
        "A time-travel mystery that spans multiple generations.",
    ),
]


def default_catalog(
    poster_factory: Optional[Callable[[], Any]] = None,
) -> Catalog:
    """
    Будує стартовий каталог.
    poster_factory викликається окремо для кожного фільму,
    тож кожен запис має власний постер.
    """
    records = []
    for title, synopsis in DEFAULT_MOVIES:
        poster = poster_factory() if poster_factory is not None else None
        records.append(MovieRecord(title=title, synopsis=synopsis, poster=poster))
    return Catalog(records)
