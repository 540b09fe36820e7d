import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.movie_catalog import DataLoadError, Movie, MovieCatalog, load_catalog


def test_load_movies(write_json):
    path = write_json([
        {'Title': 'The Matrix', 'MajorGenre': 'Action', 'MPAARating': 'R',
         'IMDBRating': 8.7, 'RottenTomatoesRating': 86},
        {'Title': 'Cars', 'MajorGenre': 'Animation', 'MPAARating': 'G', 'IMDBRating': 7.2},
    ])

    catalog = MovieCatalog.load(path)

    assert len(catalog) == 2
    assert catalog.source == path
    assert catalog.all[0] == Movie('The Matrix', 'Action', 'R', 8.7, 86.0)
    assert catalog.all[1].rotten_tomatoes_rating is None


def test_load_keeps_order_and_duplicates(write_json):
    path = write_json([{'Title': 'B'}, {'Title': 'A'}, {'Title': 'B'}])

    titles = [movie.title for movie in MovieCatalog.load(path)]

    assert titles == ['B', 'A', 'B']


def test_absent_and_null_fields_are_none(write_json):
    path = write_json([{}, {'Title': None, 'IMDBRating': None}])

    catalog = MovieCatalog.load(path)

    assert catalog.all == (Movie(), Movie())


def test_unknown_fields_ignored(write_json):
    path = write_json([{'Title': 'Up', 'Director': 'Pete Docter', 'US Gross': 293004164}])

    assert MovieCatalog.load(path).all == (Movie(title='Up'),)


def test_numeric_title_becomes_text(write_json):
    path = write_json([{'Title': 1776, 'MajorGenre': 'Musical'}])

    assert MovieCatalog.load(path).all[0].title == '1776'


def test_numeric_string_rating_is_parsed(write_json):
    path = write_json([{'Title': 'Up', 'IMDBRating': '8.4'}])

    assert MovieCatalog.load(path).all[0].imdb_rating == 8.4


def test_genres_are_distinct_and_skip_missing(write_json):
    path = write_json([
        {'MajorGenre': 'Drama'},
        {'MajorGenre': 'Action'},
        {'MajorGenre': None},
        {'MajorGenre': 'Drama'},
        {},
    ])

    genres = MovieCatalog.load(path).genres

    assert sorted(genres) == ['Action', 'Drama']
    assert len(genres) == len(set(genres))


def test_missing_file(tmp_path):
    path = str(tmp_path / 'nope.json')

    with pytest.raises(DataLoadError) as exc_info:
        MovieCatalog.load(path)

    assert exc_info.value.path == path


def test_directory_is_unreadable(tmp_path):
    with pytest.raises(DataLoadError):
        MovieCatalog.load(str(tmp_path))


def test_invalid_json(write_json):
    with pytest.raises(DataLoadError, match='invalid JSON'):
        MovieCatalog.load(write_json('[{"Title": "Cars",'))


def test_not_an_array(write_json):
    with pytest.raises(DataLoadError, match='JSON array'):
        MovieCatalog.load(write_json({'Title': 'Cars'}))


@pytest.mark.parametrize('record', [
    'Cars',
    ['Cars'],
    {'Title': ['Cars']},
    {'MajorGenre': {'name': 'Drama'}},
    {'IMDBRating': 'great'},
    {'RottenTomatoesRating': True},
    {'IMDBRating': [7.2]},
    {'IMDBRating': 'nan'},
    {'RottenTomatoesRating': '-inf'},
    {'IMDBRating': 10 ** 400},
])
def test_malformed_record(write_json, record):
    path = write_json([{'Title': 'Up'}, record])

    with pytest.raises(DataLoadError, match='record #1'):
        MovieCatalog.load(path)


@pytest.mark.parametrize('token', ['NaN', 'Infinity', '-Infinity'])
def test_non_finite_constants_are_invalid_json(write_json, token):
    path = write_json('[{"Title": "Ghost", "IMDBRating": ' + token + '}]')

    with pytest.raises(DataLoadError, match='invalid JSON'):
        MovieCatalog.load(path)


def test_overflowing_float_literal_is_rejected(write_json):
    path = write_json('[{"Title": "Big", "RottenTomatoesRating": 1e400}]')

    with pytest.raises(DataLoadError, match='finite'):
        MovieCatalog.load(path)


def test_load_catalog_uses_config_path(write_json, monkeypatch):
    from config import Config

    path = write_json([{'Title': 'Cars'}])
    monkeypatch.setattr(Config, 'MOVIES_JSON_PATH', path)

    assert load_catalog().all == (Movie(title='Cars'),)


def test_movie_is_immutable():
    movie = Movie(title='Cars')

    with pytest.raises(AttributeError):
        movie.title = 'Cars 2'


def test_movie_to_dict():
    movie = Movie('Cars', 'Animation', 'G', 7.2, None)

    assert movie.to_dict() == {
        'Title': 'Cars',
        'MajorGenre': 'Animation',
        'MPAARating': 'G',
        'IMDBRating': 7.2,
        'RottenTomatoesRating': None
    }
