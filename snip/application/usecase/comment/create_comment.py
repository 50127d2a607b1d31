"""Create comment use case."""

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import CommentService
from snip.domain.value import Caller, CommentId, SnippetId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    snippet_id: str  # UUID string
    body: str
    parent_id: str | None = None  # Parent comment ID for replies
    caller: Caller | None = None  # None for anonymous requests


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a snippet or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            AuthenticationRequiredError: If the request is anonymous
            InvalidInputError: If an ID or the body is invalid
            NotFoundError: If the snippet or parent comment is not readable
        """
        snippet_id = SnippetId(parse_uuid(request.snippet_id, "snippet id"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent id"))
            if request.parent_id
            else None
        )

        comment = await self.comment_service.create(
            snippet_id=snippet_id,
            caller=request.caller,
            body=request.body,
            parent_id=parent_id,
        )
        return CreateCommentResponse.from_comment(comment)
