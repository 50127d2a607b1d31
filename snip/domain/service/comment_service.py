"""Comment domain service.

Owns the comment thread lifecycle. Every operation is gated by the
AccessPolicy against the comment's snippet or the comment's author.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from snip.config import CommentSettings
from snip.domain.error import (
    AuthenticationRequiredError,
    InvalidInputError,
    NotFoundError,
)
from snip.domain.model.comment import Comment
from snip.domain.repository import CommentRepository, SnippetRepository
from snip.domain.value import (
    Caller,
    CommentId,
    CommentStatus,
    PageMeta,
    SnippetId,
    SortOrder,
)
from snip.domain.value.common import ValueObject

from .access_policy import AccessPolicy


class CommentPage(ValueObject):
    """One page of a thread level."""

    items: list[Comment]
    meta: PageMeta


class CommentService:
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        snippet_repository: SnippetRepository,
        access_policy: AccessPolicy,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            snippet_repository: Snippet repository (read only)
            access_policy: Access policy for snippets and comments
            settings: Comment limits
        """
        self.comment_repository = comment_repository
        self.snippet_repository = snippet_repository
        self.access_policy = access_policy
        self.settings = settings

    async def create(
        self,
        snippet_id: SnippetId,
        caller: Optional[Caller],
        body: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a snippet or reply to another comment.

        The caller must be able to read the snippet. A reply's parent must
        exist on the same snippet. The parent's reply_count is incremented
        atomically after the insert.

        Args:
            snippet_id: Snippet ID
            caller: Authenticated caller
            body: Comment body
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            AuthenticationRequiredError: If caller is anonymous
            InvalidInputError: If body is empty or too long
            NotFoundError: If snippet or parent is missing or not readable
        """
        if caller is None:
            raise AuthenticationRequiredError("create comments")
        body = self._clean_body(body)

        with logfire.span(
            "comment_service.create",
            snippet_id=str(snippet_id),
            caller_id=str(caller.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            await self._assert_snippet_readable(snippet_id, caller)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        snippet_id=str(snippet_id),
                    )
                    raise NotFoundError("Comment")
                if parent.snippet_id != snippet_id:
                    logfire.warn(
                        "Parent comment belongs to another snippet",
                        parent_id=str(parent_id),
                        parent_snippet_id=str(parent.snippet_id),
                        target_snippet_id=str(snippet_id),
                    )
                    raise NotFoundError("Comment")

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                snippet_id=snippet_id,
                author_id=caller.id,
                parent_id=parent_id,
                body=body,
                status=CommentStatus.VISIBLE,
                reply_count=0,
                created_at=now,
                updated_at=now,
                edited_at=None,
                deleted_at=None,
            )
            saved = await self.comment_repository.insert(comment)

            if parent_id:
                await self.comment_repository.increment_reply_count(parent_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                snippet_id=str(snippet_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def list(
        self,
        snippet_id: SnippetId,
        caller: Optional[Caller],
        parent_id: CommentId | None = None,
        page: int = 1,
        limit: int | None = None,
        order: SortOrder = SortOrder.ASC,
    ) -> CommentPage:
        """List one level of a snippet's thread.

        Without parent_id the top-level comments are listed, otherwise the
        direct replies to that parent. Deleted comments are left out.

        Args:
            snippet_id: Snippet ID
            caller: Caller, None for anonymous requests
            parent_id: Parent comment whose replies to list
            page: 1-indexed page number
            limit: Page size, clamped to the configured maximum
            order: Sort direction on created_at

        Returns:
            Comments on the page and pagination metadata

        Raises:
            NotFoundError: If the snippet is missing or not readable
        """
        page = max(page, 1)
        if limit is None:
            limit = self.settings.default_page_size
        limit = min(max(limit, 1), self.settings.max_page_size)

        with logfire.span(
            "comment_service.list",
            snippet_id=str(snippet_id),
            parent_id=str(parent_id) if parent_id else None,
            page=page,
            limit=limit,
            order=order.value,
        ):
            await self._assert_snippet_readable(snippet_id, caller)

            items = await self.comment_repository.list_live(
                snippet_id=snippet_id,
                parent_id=parent_id,
                order=order,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.comment_repository.count_live(
                snippet_id=snippet_id, parent_id=parent_id
            )
            logfire.info(
                "Comments listed",
                snippet_id=str(snippet_id),
                count=len(items),
                total=total,
            )
            return CommentPage(items=items, meta=PageMeta.build(page, limit, total))

    async def get(
        self, comment_id: CommentId, caller: Optional[Caller] = None
    ) -> Comment:
        """Get a single comment.

        Deleted or hidden comments are only returned to their author or an
        admin. The snippet must be readable by the caller.

        Raises:
            NotFoundError: If the comment is missing or not visible to caller
        """
        with logfire.span("comment_service.get", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment")

            snippet = await self.snippet_repository.find_by_id(comment.snippet_id)
            if snippet is None or not self.access_policy.can_read(snippet, caller):
                logfire.warn(
                    "Comment on unreadable snippet requested",
                    comment_id=str(comment_id),
                    snippet_id=str(comment.snippet_id),
                )
                raise NotFoundError("Comment")

            if not comment.is_publicly_visible and not (
                self.access_policy.can_manage_comment(comment, caller)
            ):
                logfire.warn(
                    "Deleted or hidden comment requested",
                    comment_id=str(comment_id),
                    deleted=comment.is_deleted,
                    status=comment.status.value,
                )
                raise NotFoundError("Comment")

            return comment

    async def update(
        self, comment_id: CommentId, caller: Optional[Caller], body: str
    ) -> Comment:
        """Replace a comment's body.

        Only the author or an admin may edit. Status, reply_count and the
        thread position are untouched.

        Raises:
            InvalidInputError: If body is empty or too long
            NotFoundError: If the comment is missing or not editable by caller
        """
        body = self._clean_body(body)

        with logfire.span(
            "comment_service.update",
            comment_id=str(comment_id),
            body_length=len(body),
        ):
            await self._find_managed(comment_id, caller)

            updated = await self.comment_repository.update_body(comment_id, body)
            if updated is None:
                raise NotFoundError("Comment")

            logfire.info("Comment body updated", comment_id=str(comment_id))
            return updated

    async def soft_delete(
        self, comment_id: CommentId, caller: Optional[Caller]
    ) -> None:
        """Soft-delete a comment.

        Idempotent. Only the call that actually sets deleted_at decrements
        the parent's reply_count. Replies are left in place.

        Raises:
            NotFoundError: If the comment is missing or not deletable by caller
        """
        with logfire.span("comment_service.soft_delete", comment_id=str(comment_id)):
            comment = await self._find_managed(comment_id, caller)

            if comment.is_deleted:
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return

            deleted = await self.comment_repository.soft_delete(comment_id)
            if not deleted:
                # Lost a race with a concurrent delete; the winner decremented.
                logfire.info("Comment already deleted", comment_id=str(comment_id))
                return

            if comment.parent_id:
                await self.comment_repository.decrement_reply_count(comment.parent_id)

            logfire.info(
                "Comment soft-deleted",
                comment_id=str(comment_id),
                parent_id=str(comment.parent_id) if comment.parent_id else None,
            )

    async def find_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID without any access checks.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        return await self.comment_repository.find_by_id(comment_id)

    async def assert_thread_readable(
        self, comment: Comment, caller: Optional[Caller]
    ) -> None:
        """Raise NotFoundError unless the comment's snippet is readable."""
        snippet = await self.snippet_repository.find_by_id(comment.snippet_id)
        self.access_policy.assert_readable(snippet, caller, resource="Comment")

    async def _assert_snippet_readable(
        self, snippet_id: SnippetId, caller: Optional[Caller]
    ) -> None:
        snippet = await self.snippet_repository.find_by_id(snippet_id)
        if snippet is None:
            logfire.warn("Snippet not found", snippet_id=str(snippet_id))
        elif not self.access_policy.can_read(snippet, caller):
            logfire.warn(
                "Private snippet requested by non-owner",
                snippet_id=str(snippet_id),
                caller_id=str(caller.id) if caller else None,
            )
        self.access_policy.assert_readable(snippet, caller)

    async def _find_managed(
        self, comment_id: CommentId, caller: Optional[Caller]
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment")
        if not self.access_policy.can_manage_comment(comment, caller):
            logfire.warn(
                "Comment change by non-author",
                comment_id=str(comment_id),
                caller_id=str(caller.id) if caller else None,
            )
            raise NotFoundError("Comment")
        return comment

    def _clean_body(self, body: str) -> str:
        body = body.strip()
        if not body:
            raise InvalidInputError("Comment body is required")
        if len(body) > self.settings.max_body_length:
            raise InvalidInputError(
                f"Comment body must be at most {self.settings.max_body_length} characters"
            )
        return body
