from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')


@dataclass
class ApiResponse(Generic[T]):
    data: T | None
    status: str | None = None
    error: str | None = None
