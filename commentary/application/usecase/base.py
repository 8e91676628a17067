"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case: one request model in, one response model out."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
