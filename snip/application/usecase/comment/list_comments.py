"""List comments use case."""

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import CommentService
from snip.domain.value import Caller, CommentId, PageMeta, SnippetId, SortOrder

from .common import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    snippet_id: str  # UUID string
    parent_id: str | None = None  # List replies to this comment
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size
    order: SortOrder = SortOrder.ASC
    caller: Caller | None = None


class ListCommentsResponse(BaseModel):
    """List comments response."""

    items: list[CommentItem]
    meta: PageMeta


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing one level of a snippet's comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Top-level comments are listed unless parent_id is given. Deleted
        comments are never listed.

        Args:
            request: List comments request

        Returns:
            Page of comments with pagination metadata
        """
        snippet_id = SnippetId(parse_uuid(request.snippet_id, "snippet id"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent id"))
            if request.parent_id
            else None
        )

        page = await self.comment_service.list(
            snippet_id=snippet_id,
            caller=request.caller,
            parent_id=parent_id,
            page=request.page,
            limit=request.limit,
            order=request.order,
        )
        return ListCommentsResponse(
            items=[CommentItem.from_comment(c) for c in page.items],
            meta=page.meta,
        )
