from flask import Flask, current_app, jsonify, request, render_template
from config import Config
import logging
import math

from services.catalog_check import check_catalog

from database.movie_catalog import load_catalog
from database.movie_filters import apply_filters, mpaa_ratings

from metrics import (
    metrics_endpoint, track_request, record_query,
    CATALOG_MOVIES, CATALOG_GENRES
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def get_catalog():
    return current_app.extensions['movie_catalog']


def finite_float(value):
    """Parse a query string bound; NaN and infinity are rejected like any non-number"""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value}")
    return number


def read_filter_args(args):
    """Bind query string parameters to filter arguments"""
    return {
        'term': args.get('SearchTerms', ''),
        'mpaa': args.getlist('MPAARatings'),
        'genres': args.getlist('Genres'),
        'imdb_min': args.get('IMDBMin', type=finite_float),
        'imdb_max': args.get('IMDBMax', type=finite_float),
        'rotten_min': args.get('RottenMin', type=finite_float),
        'rotten_max': args.get('RottenMax', type=finite_float)
    }


def run_query(filters):
    movies = apply_filters(get_catalog().all, **filters)

    record_query({
        'search': bool(filters['term']),
        'mpaa': bool(filters['mpaa']),
        'genre': bool(filters['genres']),
        'imdb': filters['imdb_min'] is not None or filters['imdb_max'] is not None,
        'rotten': filters['rotten_min'] is not None or filters['rotten_max'] is not None
    }, len(movies))

    return movies


def home():
    filters = read_filter_args(request.args)
    movies = run_query(filters)

    return render_template(
        'index.html',
        movies=movies,
        mpaa_ratings=mpaa_ratings(),
        genres=get_catalog().genres,
        filters=filters
    )


def api_movies():
    filters = read_filter_args(request.args)
    movies = run_query(filters)

    return jsonify({
        'results': [movie.to_dict() for movie in movies],
        'count': len(movies)
    })


def api_genres():
    return jsonify({
        'genres': list(get_catalog().genres)
    })


def api_mpaa_ratings():
    return jsonify({
        'mpaa_ratings': mpaa_ratings()
    })


def health():
    result = check_catalog(get_catalog())
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


def metrics():
    return metrics_endpoint()


def create_app(config_object=Config, catalog=None):
    """
    Build the Flask app around a loaded movie catalog

    Args:
        config_object: settings class passed to app.config.from_object
        catalog: MovieCatalog to serve; loaded from MOVIES_JSON_PATH when omitted

    Raises:
        DataLoadError: the catalog file could not be loaded
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    if catalog is None:
        catalog = load_catalog(app.config['MOVIES_JSON_PATH'])

    app.extensions['movie_catalog'] = catalog
    CATALOG_MOVIES.set(len(catalog))
    CATALOG_GENRES.set(len(catalog.genres))
    logger.info(f"Serving {len(catalog)} movies")

    app.add_url_rule('/', 'home', track_request(home))
    app.add_url_rule('/api/movies', 'api_movies', track_request(api_movies))
    app.add_url_rule('/api/genres', 'api_genres', api_genres)
    app.add_url_rule('/api/mpaa-ratings', 'api_mpaa_ratings', api_mpaa_ratings)
    app.add_url_rule('/health', 'health', track_request(health))
    app.add_url_rule('/metrics', 'metrics', track_request(metrics))

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
