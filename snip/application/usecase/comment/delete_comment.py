"""Delete comment use case."""

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import CommentService
from snip.domain.value import Caller, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    caller: Caller | None = None  # Must be the author or an admin


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool = True


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment.

    Deleting an already deleted comment succeeds without side effects.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        comment_id = CommentId(parse_uuid(request.comment_id, "comment id"))
        await self.comment_service.soft_delete(comment_id, request.caller)
        return DeleteCommentResponse(comment_id=request.comment_id)
