"""Get comment use case."""

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import CommentService
from snip.domain.value import Caller, CommentId

from .common import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string
    caller: Caller | None = None


class GetCommentResponse(CommentItem):
    """Get comment response."""


class GetCommentUseCase(BaseUseCase):
    """Use case for fetching a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        comment_id = CommentId(parse_uuid(request.comment_id, "comment id"))
        comment = await self.comment_service.get(comment_id, request.caller)
        return GetCommentResponse.from_comment(comment)
