from fastapi import APIRouter

from cinedb.api.deps import ExecutorDep, ensure_found
from cinedb.api_client import people as people_api
from cinedb.schemas.person import Person

router = APIRouter(prefix="/people", tags=["people"])


@router.get("/{id}", response_model=None)
async def read_person(executor: ExecutorDep, id: int) -> Person:
    return ensure_found(await people_api.find_person_by_id(executor, id), f"Person {id}")
