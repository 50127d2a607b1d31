"""Snippet entity.

Snippets are the content items comments attach to. This service only
reads them to decide visibility; snippet CRUD lives elsewhere.
"""

from datetime import datetime

from pydantic import Field

from snip.domain.model.common import DomainModel
from snip.domain.value import SnippetId, UserId


class Snippet(DomainModel):
    """Snippet entity.

    Visibility is binary: a snippet is either public or private to its
    owner (and administrators).
    """

    id: SnippetId
    owner_id: UserId
    is_public: bool
    title: str = Field(default="", max_length=200)
    language: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
