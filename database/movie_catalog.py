"""Movie catalog loaded from a JSON file"""
import json
import logging
import math
from dataclasses import dataclass
from typing import Optional

from config import Config


logger = logging.getLogger(__name__)


class DataLoadError(Exception):
    """Catalog file is missing, unreadable or malformed"""

    def __init__(self, path, message):
        super().__init__(f"{path}: {message}")
        self.path = path


def _text_field(record, key):
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"field '{key}' must be text, got {type(value).__name__}")
    # Numbers in text fields (e.g. a title like 1776) are kept as text
    return str(value)


def _number_field(record, key):
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"field '{key}' must be numeric, got bool")
    if not isinstance(value, (int, float, str)):
        raise ValueError(f"field '{key}' must be numeric, got {type(value).__name__}")
    try:
        number = float(value)
    except (ValueError, OverflowError):
        raise ValueError(f"field '{key}' must be numeric, got {value!r:.40}")
    # NaN would slip through every range comparison
    if not math.isfinite(number):
        raise ValueError(f"field '{key}' must be a finite number, got {value!r:.40}")
    return number


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


@dataclass(frozen=True)
class Movie:
    title: Optional[str] = None
    major_genre: Optional[str] = None
    mpaa_rating: Optional[str] = None
    imdb_rating: Optional[float] = None
    rotten_tomatoes_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, record):
        """
        Build a movie from one JSON object

        Absent and null fields become None. Unknown keys are ignored.

        Raises:
            ValueError: record is not an object or a field has the wrong shape
        """
        if not isinstance(record, dict):
            raise ValueError(f"expected an object, got {type(record).__name__}")

        return cls(
            title=_text_field(record, 'Title'),
            major_genre=_text_field(record, 'MajorGenre'),
            mpaa_rating=_text_field(record, 'MPAARating'),
            imdb_rating=_number_field(record, 'IMDBRating'),
            rotten_tomatoes_rating=_number_field(record, 'RottenTomatoesRating'),
        )

    def to_dict(self):
        return {
            'Title': self.title,
            'MajorGenre': self.major_genre,
            'MPAARating': self.mpaa_rating,
            'IMDBRating': self.imdb_rating,
            'RottenTomatoesRating': self.rotten_tomatoes_rating,
        }


class MovieCatalog:
    """Read-only collection of movies plus the genres they cover"""

    def __init__(self, movies, source=None):
        self.source = source
        self._movies = tuple(movies)
        self._genres = self._collect_genres(self._movies)

    @staticmethod
    def _collect_genres(movies):
        seen = {}
        for movie in movies:
            if movie.major_genre is not None:
                seen.setdefault(movie.major_genre, None)
        return tuple(seen)

    @classmethod
    def load(cls, path):
        """
        Load the catalog from a JSON array of movie objects

        Args:
            path: location of the JSON file

        Returns:
            MovieCatalog

        Raises:
            DataLoadError: file missing, unreadable or malformed
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f, parse_constant=_reject_constant)
        except FileNotFoundError:
            logger.error(f"Movie catalog not found: {path}")
            raise DataLoadError(path, "file not found")
        except OSError as e:
            logger.error(f"Cannot read movie catalog {path}: {e}")
            raise DataLoadError(path, f"cannot read file: {e}") from e
        except ValueError as e:
            logger.error(f"Movie catalog {path} is not valid JSON: {e}")
            raise DataLoadError(path, f"invalid JSON: {e}") from e

        if not isinstance(records, list):
            logger.error(f"Movie catalog {path} is not a JSON array")
            raise DataLoadError(path, "expected a JSON array of movies")

        movies = []
        for index, record in enumerate(records):
            try:
                movies.append(Movie.from_dict(record))
            except ValueError as e:
                logger.error(f"Bad movie record #{index} in {path}: {e}")
                raise DataLoadError(path, f"record #{index}: {e}") from e

        catalog = cls(movies, source=path)
        logger.info(f"Loaded {len(catalog)} movies, {len(catalog.genres)} genres from {path}")
        return catalog

    @property
    def all(self):
        return self._movies

    @property
    def genres(self):
        return self._genres

    def __len__(self):
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)


def load_catalog(path=None):
    """Load the catalog from the configured JSON path"""
    return MovieCatalog.load(path or Config.MOVIES_JSON_PATH)
