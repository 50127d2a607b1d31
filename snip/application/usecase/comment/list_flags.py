"""List flags use case."""

from datetime import datetime

from pydantic import BaseModel

from snip.application.usecase.base import BaseUseCase, parse_uuid
from snip.domain.service import FlagService
from snip.domain.value import Caller, CommentId


class FlagItem(BaseModel):
    """Flag item in response."""

    flag_id: str
    reporter_user_id: str | None
    reason: str
    message: str | None
    created_at: datetime


class ListFlagsRequest(BaseModel):
    """List flags request."""

    comment_id: str  # UUID string
    caller: Caller | None = None  # Must be a moderator or admin


class ListFlagsResponse(BaseModel):
    """List flags response."""

    comment_id: str
    flags: list[FlagItem]
    total: int


class ListFlagsUseCase(BaseUseCase):
    """Use case for moderators reading the flags lodged on a comment."""

    def __init__(self, flag_service: FlagService) -> None:
        """Initialize list flags use case.

        Args:
            flag_service: Flag domain service
        """
        self.flag_service = flag_service

    async def execute(self, request: ListFlagsRequest) -> ListFlagsResponse:
        """Execute list flags flow.

        Args:
            request: List flags request

        Returns:
            Flags on the comment, oldest first

        Raises:
            NotFoundError: If the comment is missing or the caller is not
                a moderator
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment id"))
        flags = await self.flag_service.list_flags(comment_id, request.caller)

        flag_items = [
            FlagItem(
                flag_id=str(flag.id),
                reporter_user_id=(
                    str(flag.reporter_user_id) if flag.reporter_user_id else None
                ),
                reason=flag.reason.value,
                message=flag.message,
                created_at=flag.created_at,
            )
            for flag in flags
        ]
        return ListFlagsResponse(
            comment_id=request.comment_id, flags=flag_items, total=len(flag_items)
        )
