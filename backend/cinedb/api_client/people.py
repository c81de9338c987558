from cinedb.api_client.executor import RequestExecutor
from cinedb.schemas.person import Person


async def find_person_by_id(executor: RequestExecutor, id: int) -> Person | None:
    return await executor.get(f"person/{id}")
