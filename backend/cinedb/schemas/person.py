from typing import Any, TypedDict

__all__ = ["Person"]


class Person(TypedDict, total=False):
    id: int
    name: str
    biography: str
    birthday: str | None
    deathday: str | None
    place_of_birth: str | None
    known_for_department: str
    profile_path: str | None
    popularity: float
    known_for: list[dict[str, Any]]
