"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from snip.domain.error import InvalidInputError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an identifier received as a string.

    Args:
        value: Raw identifier
        field: Field name used in the error message

    Returns:
        Parsed UUID

    Raises:
        InvalidInputError: If value is not a valid UUID
    """
    try:
        return UUID(value)
    except ValueError as e:
        raise InvalidInputError(f"Invalid {field}") from e
