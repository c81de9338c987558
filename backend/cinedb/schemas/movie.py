from typing import TypedDict

from .common import Credits, Genre, Videos

__all__ = ["Movie"]


class Movie(TypedDict, total=False):
    id: int
    title: str
    original_title: str
    original_language: str
    overview: str
    release_date: str
    runtime: int | None
    poster_path: str | None
    backdrop_path: str | None
    popularity: float
    vote_average: float
    vote_count: int
    genre_ids: list[int]
    genres: list[Genre]
    videos: Videos
    credits: Credits
