"""Shared base for value objects such as Caller and PageMeta."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Frozen, equality-by-value base. Hashable, so usable as dict keys."""

    model_config = ConfigDict(frozen=True)
