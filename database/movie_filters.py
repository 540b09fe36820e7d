"""Search and filter functions over a sequence of movies

Every function returns a new list (or the input itself when no constraint
is given) and keeps the original order.
"""


MPAA_RATINGS = ('G', 'PG', 'PG-13', 'R', 'NC-17')


def mpaa_ratings():
    """Possible MPAA ratings, most permissive first"""
    return list(MPAA_RATINGS)


def search(movies, term):
    """
    Movies whose title contains the search term, ignoring case

    Args:
        movies: sequence of Movie
        term: search string; None or '' matches everything

    Returns:
        list of Movie, or `movies` unchanged when there is no term
    """
    if not term:
        return movies

    needle = term.casefold()
    return [
        movie for movie in movies
        if movie.title is not None and needle in movie.title.casefold()
    ]


def _filter_by_membership(movies, values, attribute):
    if not values:
        return movies

    # A bare string is one value, not a set of characters
    if isinstance(values, str):
        values = [values]
    allowed = set(values)
    results = []
    for movie in movies:
        value = getattr(movie, attribute)
        if value is not None and value in allowed:
            results.append(movie)
    return results


def filter_by_mpaa_rating(movies, ratings):
    """Movies rated with one of `ratings`; no ratings means no filtering"""
    return _filter_by_membership(movies, ratings, 'mpaa_rating')


def filter_by_genre(movies, genres):
    """Movies whose major genre is one of `genres`; no genres means no filtering"""
    return _filter_by_membership(movies, genres, 'major_genre')


def _filter_by_range(movies, minimum, maximum, attribute):
    if minimum is None and maximum is None:
        return movies

    results = []
    for movie in movies:
        value = getattr(movie, attribute)
        # Unrated movies never satisfy a bound
        if value is None:
            continue
        if minimum is not None and value < minimum:
            continue
        if maximum is not None and value > maximum:
            continue
        results.append(movie)
    return results


def filter_by_imdb_rating(movies, minimum=None, maximum=None):
    """
    Movies with an IMDB rating in [minimum, maximum]

    A missing bound leaves that side open. With both bounds missing the
    input is returned unchanged; otherwise unrated movies are dropped.
    """
    return _filter_by_range(movies, minimum, maximum, 'imdb_rating')


def filter_by_rotten_rating(movies, minimum=None, maximum=None):
    """Same as filter_by_imdb_rating, for the Rotten Tomatoes score"""
    return _filter_by_range(movies, minimum, maximum, 'rotten_tomatoes_rating')


def apply_filters(movies, term=None, mpaa=None, genres=None,
                  imdb_min=None, imdb_max=None,
                  rotten_min=None, rotten_max=None):
    """Run the search and every filter in turn, each narrowing the last result"""
    results = search(movies, term)
    results = filter_by_mpaa_rating(results, mpaa)
    results = filter_by_genre(results, genres)
    results = filter_by_imdb_rating(results, imdb_min, imdb_max)
    results = filter_by_rotten_rating(results, rotten_min, rotten_max)
    return results
