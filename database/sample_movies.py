SAMPLE_MOVIES = [
    {
        'Title': 'The Shawshank Redemption',
        'MajorGenre': 'Drama',
        'MPAARating': 'R',
        'IMDBRating': 9.2,
        'RottenTomatoesRating': 88
    },
    {
        'Title': 'The Godfather',
        'MajorGenre': 'Drama',
        'MPAARating': 'R',
        'IMDBRating': 9.1,
        'RottenTomatoesRating': 100
    },
    {
        'Title': 'The Dark Knight',
        'MajorGenre': 'Action',
        'MPAARating': 'PG-13',
        'IMDBRating': 8.9,
        'RottenTomatoesRating': 94
    },
    {
        'Title': 'Pulp Fiction',
        'MajorGenre': 'Thriller/Suspense',
        'MPAARating': 'R',
        'IMDBRating': 8.9,
        'RottenTomatoesRating': 92
    },
    {
        'Title': 'Forrest Gump',
        'MajorGenre': 'Drama',
        'MPAARating': 'PG-13',
        'IMDBRating': 8.6,
        'RottenTomatoesRating': 71
    },
    {
        'Title': 'The Matrix',
        'MajorGenre': 'Action',
        'MPAARating': 'R',
        'IMDBRating': 8.7,
        'RottenTomatoesRating': 86
    },
    {
        'Title': 'Goodfellas',
        'MajorGenre': 'Drama',
        'MPAARating': 'R',
        'IMDBRating': 8.7,
        'RottenTomatoesRating': 96
    },
    {
        'Title': 'The Lord of the Rings: The Return of the King',
        'MajorGenre': 'Adventure',
        'MPAARating': 'PG-13',
        'IMDBRating': 8.8,
        'RottenTomatoesRating': 94
    },
    {
        'Title': 'Star Wars Ep. V: The Empire Strikes Back',
        'MajorGenre': 'Adventure',
        'MPAARating': 'PG',
        'IMDBRating': 8.8,
        'RottenTomatoesRating': 97
    },
    {
        'Title': 'The Silence of the Lambs',
        'MajorGenre': 'Thriller/Suspense',
        'MPAARating': 'R',
        'IMDBRating': 8.7,
        'RottenTomatoesRating': 96
    },
    {
        'Title': 'Saving Private Ryan',
        'MajorGenre': 'Action',
        'MPAARating': 'R',
        'IMDBRating': 8.5,
        'RottenTomatoesRating': 91
    },
    {
        'Title': 'Gladiator',
        'MajorGenre': 'Action',
        'MPAARating': 'R',
        'IMDBRating': 8.3,
        'RottenTomatoesRating': 76
    },
    {
        'Title': 'Cars',
        'MajorGenre': 'Adventure',
        'MPAARating': 'G',
        'IMDBRating': 7.4,
        'RottenTomatoesRating': 74
    },
    {
        'Title': 'Toy Story',
        'MajorGenre': 'Adventure',
        'MPAARating': 'G',
        'IMDBRating': 8.2,
        'RottenTomatoesRating': 100
    },
    {
        'Title': 'Finding Nemo',
        'MajorGenre': 'Adventure',
        'MPAARating': 'G',
        'IMDBRating': 8.2,
        'RottenTomatoesRating': 98
    },
    {
        'Title': 'Up',
        'MajorGenre': 'Adventure',
        'MPAARating': 'PG',
        'IMDBRating': 8.4,
        'RottenTomatoesRating': 97
    },
    {
        'Title': 'Borat',
        'MajorGenre': 'Comedy',
        'MPAARating': 'R',
        'IMDBRating': 7.6,
        'RottenTomatoesRating': 91
    },
    {
        'Title': 'Showgirls',
        'MajorGenre': 'Drama',
        'MPAARating': 'NC-17',
        'IMDBRating': 4.1,
        'RottenTomatoesRating': 14
    },
    {
        'Title': 'The Texas Chainsaw Massacre',
        'MajorGenre': 'Horror',
        'MPAARating': 'R',
        'IMDBRating': 6.2,
        'RottenTomatoesRating': None
    },
    {
        'Title': '1776',
        'MajorGenre': 'Musical',
        'MPAARating': 'G',
        'IMDBRating': 7.6,
        'RottenTomatoesRating': None
    },
    {
        'Title': 'Hoop Dreams',
        'MajorGenre': 'Documentary',
        'MPAARating': 'PG-13',
        'IMDBRating': 8.3,
        'RottenTomatoesRating': 98
    },
    {
        'Title': 'The Last Waltz',
        'MajorGenre': 'Concert/Performance',
        'MPAARating': None,
        'IMDBRating': None,
        'RottenTomatoesRating': 98
    },
    {
        'Title': 'Open Water',
        'MajorGenre': None,
        'MPAARating': 'R',
        'IMDBRating': 5.8,
        'RottenTomatoesRating': 71
    },
    {
        'Title': None,
        'MajorGenre': 'Drama',
        'MPAARating': None,
        'IMDBRating': None,
        'RottenTomatoesRating': None
    }
]
