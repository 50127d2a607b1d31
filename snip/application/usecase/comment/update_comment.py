"""Update comment use case."""

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import CommentService
from snip.domain.value import Caller, CommentId

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    body: str  # New body (required, cannot be empty)
    caller: Caller | None = None  # Must be the author or an admin


class UpdateCommentResponse(CommentItem):
    """Update comment response."""


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's body."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, caller and new body

        Returns:
            Updated comment details

        Raises:
            InvalidInputError: If the ID or body is invalid
            NotFoundError: If the comment is missing or the caller may not edit it
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment id"))
        updated = await self.comment_service.update(
            comment_id, request.caller, request.body
        )
        return UpdateCommentResponse.from_comment(updated)
