from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response
import time
import functools


REQUEST_COUNT = Counter(
    'flask_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'flask_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


CATALOG_MOVIES = Gauge(
    'movie_catalog_movies',
    'Number of movies in the loaded catalog'
)

CATALOG_GENRES = Gauge(
    'movie_catalog_genres',
    'Number of distinct genres in the loaded catalog'
)


SEARCH_QUERY_COUNT = Counter(
    'flask_search_queries_total',
    'Total title search queries'
)

FILTER_USAGE_COUNT = Counter(
    'flask_filter_usage_total',
    'Catalog queries with a given filter active',
    ['filter']
)

SEARCH_RESULTS_COUNT = Histogram(
    'flask_search_results',
    'Number of movies returned per query'
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
            if isinstance(response, tuple):
                status_code = response[1]
            else:
                status_code = getattr(response, 'status_code', 200)

            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=status_code
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=f.__name__,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                method=f.__name__,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def record_query(filters, results_count):
    """
    Count one catalog query

    Args:
        filters: dict of filter name -> whether it was active
        results_count: number of movies returned
    """
    if filters.get('search'):
        SEARCH_QUERY_COUNT.inc()
    for name, active in filters.items():
        if active:
            FILTER_USAGE_COUNT.labels(filter=name).inc()
    SEARCH_RESULTS_COUNT.observe(results_count)


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
