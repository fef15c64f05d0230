from .movie import MovieRecord
from .catalog import Catalog
from .seed import DEFAULT_MOVIES, default_catalog

__all__ = ["MovieRecord", "Catalog", "DEFAULT_MOVIES", "default_catalog"]
