"""Domain value objects for snippet comments.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from snip.domain.value.common import ValueObject
from snip.domain.value.identifiers import UserId


class Role(str, Enum):
    """Caller role issued by the identity provider."""

    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    Independent of soft deletion. Nothing in this service sets HIDDEN;
    moderation tooling writes it directly.
    """

    VISIBLE = "visible"
    HIDDEN = "hidden"


class FlagReason(str, Enum):
    """Reason a comment was reported."""

    SPAM = "spam"
    ABUSE = "abuse"
    OFF_TOPIC = "off-topic"
    OTHER = "other"


class SortOrder(str, Enum):
    """Direction for listing comments by creation time."""

    ASC = "asc"
    DESC = "desc"


class Caller(ValueObject):
    """Authenticated identity making a request.

    Anonymous requests are represented by ``None`` rather than a Caller.
    """

    id: UserId
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        """Whether the caller holds the ADMIN role."""
        return self.role == Role.ADMIN


class PageMeta(ValueObject):
    """Offset pagination metadata for a listing."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PageMeta":
        """Compute derived page fields from page, limit and total."""
        total_pages = (total + limit - 1) // limit if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )
