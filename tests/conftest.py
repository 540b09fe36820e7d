import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.movie_catalog import Movie, MovieCatalog


@pytest.fixture
def matrix():
    return Movie(title='The Matrix', major_genre='Action', mpaa_rating='R', imdb_rating=8.7)


@pytest.fixture
def cars():
    return Movie(title='Cars', major_genre='Animation', mpaa_rating='G', imdb_rating=7.2)


@pytest.fixture
def catalog(matrix, cars):
    return MovieCatalog([
        matrix,
        cars,
        Movie(title='Showgirls', major_genre='Drama', mpaa_rating='NC-17',
              imdb_rating=4.1, rotten_tomatoes_rating=14),
        Movie(title='Up', major_genre='Animation', mpaa_rating='PG',
              imdb_rating=8.4, rotten_tomatoes_rating=97),
        Movie(title=None, major_genre='Drama', mpaa_rating='PG-13',
              rotten_tomatoes_rating=60),
        Movie(title='The Last Waltz', major_genre=None, mpaa_rating=None,
              rotten_tomatoes_rating=98),
    ])


@pytest.fixture
def write_json(tmp_path):
    def _write(payload, name='movies.json'):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding='utf-8')
        else:
            path.write_text(json.dumps(payload), encoding='utf-8')
        return str(path)
    return _write
