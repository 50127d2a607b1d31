"""Comment flag domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from snip.config import CommentSettings
from snip.domain.error import InvalidInputError, NotFoundError
from snip.domain.model.comment_flag import CommentFlag
from snip.domain.repository import CommentFlagRepository
from snip.domain.value import Caller, CommentFlagId, CommentId, FlagReason
from snip.domain.value.common import ValueObject

from .access_policy import AccessPolicy
from .comment_service import CommentService


class FlagResult(ValueObject):
    """Result of flagging a comment. Duplicates report success too."""

    flagged: bool = True


class UnflagResult(ValueObject):
    """Result of withdrawing a flag, whether or not one existed."""

    unflagged: bool = True


def parse_reason(reason: FlagReason | str) -> FlagReason:
    """Convert a raw reason into a FlagReason.

    Raises:
        InvalidInputError: If the reason is not a known value
    """
    try:
        return FlagReason(reason)
    except ValueError as e:
        allowed = ", ".join(r.value for r in FlagReason)
        raise InvalidInputError(f"Reason must be one of: {allowed}") from e


class FlagService:
    """Domain service recording moderation flags on comments.

    Flags never change a comment's status; they are stored as raw signals
    for moderators.
    """

    def __init__(
        self,
        flag_repository: CommentFlagRepository,
        comment_service: CommentService,
        access_policy: AccessPolicy,
        settings: CommentSettings,
    ) -> None:
        """Initialize flag service.

        Args:
            flag_repository: Comment flag repository
            comment_service: Comment domain service
            access_policy: Access policy for moderation reads
            settings: Comment limits
        """
        self.flag_repository = flag_repository
        self.comment_service = comment_service
        self.access_policy = access_policy
        self.settings = settings

    async def flag(
        self,
        comment_id: CommentId,
        caller: Optional[Caller],
        reason: FlagReason | str,
        message: str | None = None,
    ) -> FlagResult:
        """Flag a comment.

        Idempotent under (comment, reporter, reason): a repeated flag is
        skipped and still reported as success. Anonymous callers flag with
        reporter_user_id=None.

        Deleted and hidden comments can still be flagged: only existence and
        snippet readability are checked, not the author-only visibility rule
        that ``CommentService.get`` applies.

        Args:
            comment_id: Comment ID
            caller: Reporter, None for anonymous flags
            reason: Flag reason
            message: Optional explanation

        Returns:
            FlagResult with flagged=True

        Raises:
            InvalidInputError: If reason or message is invalid
            NotFoundError: If the comment does not exist or its snippet is
                not readable by the caller
        """
        reason = parse_reason(reason)
        message = self._clean_message(message)

        with logfire.span(
            "flag_service.flag",
            comment_id=str(comment_id),
            reason=reason.value,
            anonymous=caller is None,
        ):
            comment = await self.comment_service.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Flag on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment")
            await self.comment_service.assert_thread_readable(comment, caller)

            flag = CommentFlag(
                id=CommentFlagId(uuid4()),
                comment_id=comment_id,
                reporter_user_id=caller.id if caller else None,
                reason=reason,
                message=message,
                created_at=datetime.now(),
            )
            inserted = await self.flag_repository.add(flag)

            if inserted:
                logfire.info(
                    "Comment flagged", comment_id=str(comment_id), reason=reason.value
                )
            else:
                logfire.info(
                    "Duplicate flag skipped",
                    comment_id=str(comment_id),
                    reason=reason.value,
                )
            return FlagResult(flagged=True)

    async def unflag(
        self,
        comment_id: CommentId,
        caller: Optional[Caller],
        reason: FlagReason | str,
    ) -> UnflagResult:
        """Withdraw the caller's flag. Always succeeds.

        Raises:
            InvalidInputError: If reason is not a known value
        """
        reason = parse_reason(reason)

        with logfire.span(
            "flag_service.unflag",
            comment_id=str(comment_id),
            reason=reason.value,
            anonymous=caller is None,
        ):
            removed = await self.flag_repository.remove(
                comment_id=comment_id,
                reporter_user_id=caller.id if caller else None,
                reason=reason,
            )
            logfire.info(
                "Flag withdrawn" if removed else "No flag to withdraw",
                comment_id=str(comment_id),
                reason=reason.value,
            )
            return UnflagResult(unflagged=True)

    async def list_flags(
        self, comment_id: CommentId, caller: Optional[Caller]
    ) -> list[CommentFlag]:
        """List flags on a comment for moderators and admins.

        Raises:
            NotFoundError: If the comment does not exist or the caller is
                not a moderator
        """
        with logfire.span("flag_service.list_flags", comment_id=str(comment_id)):
            if not self.access_policy.can_moderate(caller):
                logfire.warn(
                    "Flag listing by non-moderator",
                    comment_id=str(comment_id),
                    caller_id=str(caller.id) if caller else None,
                )
                raise NotFoundError("Comment")

            comment = await self.comment_service.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment")

            flags = await self.flag_repository.find_by_comment(comment_id)
            logfire.info(
                "Flags listed", comment_id=str(comment_id), count=len(flags)
            )
            return flags

    def _clean_message(self, message: str | None) -> str | None:
        if message is None:
            return None
        message = message.strip()
        if len(message) > self.settings.max_flag_message_length:
            raise InvalidInputError(
                f"Message must be at most {self.settings.max_flag_message_length} characters"
            )
        return message or None
