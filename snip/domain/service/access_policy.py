"""Access policy shared by every content type.

The policy is pure: it takes already-fetched entities and performs no I/O.
Every failure is reported as NotFoundError so that a caller probing a
private item sees exactly what it would see for an item that never existed.
"""

from typing import Optional, Protocol

from snip.domain.error import NotFoundError
from snip.domain.model.comment import Comment
from snip.domain.value import Caller, Role, UserId


class OwnedContent(Protocol):
    """Anything with an owner and a binary visibility flag."""

    @property
    def owner_id(self) -> UserId: ...

    @property
    def is_public(self) -> bool: ...


class AccessPolicy:
    """Decides whether a caller may read or administer a content item."""

    def can_read(self, item: OwnedContent, caller: Optional[Caller]) -> bool:
        """Public items are readable by anyone, private ones by owner or admin."""
        if item.is_public:
            return True
        return self._is_owner_or_admin(item.owner_id, caller)

    def can_write_or_administer(
        self, item: OwnedContent, caller: Optional[Caller]
    ) -> bool:
        """Only the owner or an admin may write; visibility grants nothing."""
        return self._is_owner_or_admin(item.owner_id, caller)

    def assert_readable(
        self,
        item: Optional[OwnedContent],
        caller: Optional[Caller],
        resource: str = "Snippet",
    ) -> None:
        """Raise NotFoundError unless the item exists and is readable.

        Args:
            item: The fetched item, or None if the lookup found nothing
            caller: Caller identity, None for anonymous requests
            resource: Resource name used in the error

        Raises:
            NotFoundError: If the item is missing or not readable
        """
        if item is None or not self.can_read(item, caller):
            raise NotFoundError(resource)

    def assert_owner_or_admin(
        self,
        item: Optional[OwnedContent],
        caller: Optional[Caller],
        resource: str = "Snippet",
    ) -> None:
        """Raise NotFoundError unless the item exists and the caller may write it.

        Raises:
            NotFoundError: If the item is missing or not writable
        """
        if item is None or not self.can_write_or_administer(item, caller):
            raise NotFoundError(resource)

    def can_manage_comment(
        self, comment: Comment, caller: Optional[Caller]
    ) -> bool:
        """Authors and admins manage a comment. Anonymous comments have no author."""
        return self._is_owner_or_admin(comment.author_id, caller)

    def can_moderate(self, caller: Optional[Caller]) -> bool:
        """Moderators and admins may read moderation signals."""
        return caller is not None and caller.role in (Role.MODERATOR, Role.ADMIN)

    @staticmethod
    def _is_owner_or_admin(
        owner_id: Optional[UserId], caller: Optional[Caller]
    ) -> bool:
        if caller is None:
            return False
        if caller.is_admin:
            return True
        return owner_id is not None and caller.id == owner_id
