from database.movie_filters import MPAA_RATINGS


def check_catalog(catalog):
    try:
        if catalog is None:
            return {
                'status': 'unhealthy',
                'service': 'catalog',
                'message': 'Movie catalog is not loaded'
            }

        movies = catalog.all
        total = len(movies)

        untitled = sum(1 for movie in movies if movie.title is None)
        no_genre = sum(1 for movie in movies if movie.major_genre is None)
        no_imdb = sum(1 for movie in movies if movie.imdb_rating is None)
        no_rotten = sum(1 for movie in movies if movie.rotten_tomatoes_rating is None)

        by_mpaa = {rating: 0 for rating in MPAA_RATINGS}
        unrated = 0
        unknown_mpaa = 0
        for movie in movies:
            if movie.mpaa_rating is None:
                unrated += 1
            elif movie.mpaa_rating in by_mpaa:
                by_mpaa[movie.mpaa_rating] += 1
            else:
                unknown_mpaa += 1

        return {
            'status': 'healthy' if total > 0 else 'unhealthy',
            'service': 'catalog',
            'message': f'{total} movies loaded' if total > 0 else 'Movie catalog is empty',
            'details': {
                'source': catalog.source,
                'data': {
                    'total_movies': total,
                    'genres': len(catalog.genres)
                },
                'mpaa': {
                    'by_rating': by_mpaa,
                    'unrated': unrated,
                    'unknown': unknown_mpaa
                },
                'missing_fields': {
                    'title': untitled,
                    'major_genre': no_genre,
                    'imdb_rating': no_imdb,
                    'rotten_tomatoes_rating': no_rotten
                }
            }
        }

    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'catalog',
            'message': f'Unexpected error: {str(e)}'
        }
