"""Typed snapshot of a movie's extracted fields."""

from typing import TypedDict


class MovieData(TypedDict):
    """All fields of one title page.

    Absent scalars are None and absent lists are empty.
    ``release_date`` is ISO-8601 text so the dict serializes to JSON.
    """

    id: str
    url: str
    title: str | None
    year: int | None
    release_date: str | None
    length: int | None
    rating: float | None
    director: list[str]
    cast_members: list[str]
    genres: list[str]
    plot: str | None
    tagline: str | None
    poster: str | None
