"""IMDb title page scraper.

Lazily fetches a movie's title page and extracts its metadata
field by field.

Classes:
    Movie: Reference to one title, with one accessor per field.
    Search: Title search listing.
    Top250: Top 250 chart listing.
    HttpDocumentSource: httpx based page source.

Usage:
    from src.imdb import Movie

    movie = Movie("0111161")
    movie.title()
    movie.rating()
"""

from src.imdb.fetcher import (
    DocumentSource,
    FetchError,
    HttpDocumentSource,
    ImdbError,
)
from src.imdb.listing import MovieList, Search, Top250
from src.imdb.movie import Movie
from src.imdb.types import MovieData

__all__ = [
    "DocumentSource",
    "FetchError",
    "HttpDocumentSource",
    "ImdbError",
    "Movie",
    "MovieData",
    "MovieList",
    "Search",
    "Top250",
]
