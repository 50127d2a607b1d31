"""Unflag comment use case."""

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import FlagService
from snip.domain.value import Caller, CommentId


class UnflagCommentRequest(BaseModel):
    """Unflag comment request."""

    comment_id: str  # UUID string
    reason: str
    caller: Caller | None = None


class UnflagCommentResponse(BaseModel):
    """Unflag comment response."""

    unflagged: bool


class UnflagCommentUseCase(BaseUseCase):
    """Use case for withdrawing the caller's flag on a comment."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: UnflagCommentRequest) -> UnflagCommentResponse:
        comment_id = CommentId(parse_uuid(request.comment_id, "comment id"))
        result = await self.flag_service.unflag(
            comment_id=comment_id,
            caller=request.caller,
            reason=request.reason,
        )
        return UnflagCommentResponse(unflagged=result.unflagged)
