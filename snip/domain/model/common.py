"""Shared base for comment-domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    State changes produce a new instance via ``model_copy(update=...)``;
    repositories swap the stored instance, never mutate it.
    """

    model_config = ConfigDict(frozen=True)
