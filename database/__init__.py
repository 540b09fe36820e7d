from .movie_catalog import DataLoadError, Movie, MovieCatalog, load_catalog
from .movie_filters import (
    MPAA_RATINGS,
    apply_filters,
    filter_by_genre,
    filter_by_imdb_rating,
    filter_by_mpaa_rating,
    filter_by_rotten_rating,
    mpaa_ratings,
    search,
)

__all__ = [
    'DataLoadError',
    'Movie',
    'MovieCatalog',
    'load_catalog',
    'MPAA_RATINGS',
    'apply_filters',
    'filter_by_genre',
    'filter_by_imdb_rating',
    'filter_by_mpaa_rating',
    'filter_by_rotten_rating',
    'mpaa_ratings',
    'search'
]
