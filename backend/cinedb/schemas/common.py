from typing import Any, TypedDict

__all__ = [
    "Genre",
    "Video",
    "Videos",
    "CastMember",
    "CrewMember",
    "Credits",
]


class Genre(TypedDict):
    id: int
    name: str


class Video(TypedDict, total=False):
    id: str
    key: str
    name: str
    site: str
    type: str
    official: bool


class Videos(TypedDict):
    results: list[Video]


class CastMember(TypedDict, total=False):
    id: int
    name: str
    character: str
    order: int
    profile_path: str | None


class CrewMember(TypedDict, total=False):
    id: int
    name: str
    job: str
    department: str
    profile_path: str | None


class Credits(TypedDict, total=False):
    id: int
    cast: list[CastMember]
    crew: list[CrewMember]
    guest_stars: list[dict[str, Any]]
