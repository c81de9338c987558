from typing import TypedDict

from .common import Credits, Genre, Videos

__all__ = ["Show", "Season", "Episode"]


class Episode(TypedDict, total=False):
    id: int
    name: str
    overview: str
    air_date: str | None
    episode_number: int
    season_number: int
    runtime: int | None
    still_path: str | None
    vote_average: float
    credits: Credits


class Season(TypedDict, total=False):
    id: int
    name: str
    overview: str
    air_date: str | None
    season_number: int
    episode_count: int
    poster_path: str | None
    episodes: list[Episode]


class Show(TypedDict, total=False):
    id: int
    name: str
    original_name: str
    original_language: str
    overview: str
    first_air_date: str
    last_air_date: str | None
    number_of_seasons: int
    number_of_episodes: int
    poster_path: str | None
    backdrop_path: str | None
    popularity: float
    vote_average: float
    vote_count: int
    genre_ids: list[int]
    genres: list[Genre]
    seasons: list[Season]
    videos: Videos
    credits: Credits
