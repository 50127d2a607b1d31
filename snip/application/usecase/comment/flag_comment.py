"""Flag comment use case."""

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import FlagService
from snip.domain.value import Caller, CommentId


class FlagCommentRequest(BaseModel):
    """Flag comment request."""

    comment_id: str  # UUID string
    reason: str  # spam, abuse, off-topic or other
    message: str | None = None
    caller: Caller | None = None  # Anonymous flags are allowed


class FlagCommentResponse(BaseModel):
    """Flag comment response."""

    flagged: bool


class FlagCommentUseCase(BaseUseCase):
    """Use case for reporting a comment to moderators."""

    def __init__(self, flag_service: FlagService) -> None:
        """Initialize flag comment use case.

        Args:
            flag_service: Flag domain service
        """
        self.flag_service = flag_service

    async def execute(self, request: FlagCommentRequest) -> FlagCommentResponse:
        """Execute flag comment flow.

        Repeating a flag with the same reason reports success again without
        storing a second flag.

        Args:
            request: Flag comment request

        Returns:
            Flag result

        Raises:
            InvalidInputError: If the ID, reason or message is invalid
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment id"))
        result = await self.flag_service.flag(
            comment_id=comment_id,
            caller=request.caller,
            reason=request.reason,
            message=request.message,
        )
        return FlagCommentResponse(flagged=result.flagged)
