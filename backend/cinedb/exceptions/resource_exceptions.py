from fastapi import status

from .base import AppError


class ResourceNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, description: str):
        self.description = description
        detail = f"{description} not found."
        super().__init__(detail)
