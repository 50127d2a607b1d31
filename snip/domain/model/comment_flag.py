"""Comment flag entity.

Flags are raw moderation signals. Recording one never changes the
comment's status.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from snip.domain.model.common import DomainModel
from snip.domain.value import CommentFlagId, CommentId, FlagReason, UserId


class CommentFlag(DomainModel):
    """Comment flag entity.

    Business rules:
    - One flag per (comment, reporter, reason), enforced by a unique index
    - Anonymous reporters share reporter_user_id=None and are deduplicated
      together
    """

    id: CommentFlagId
    comment_id: CommentId
    reporter_user_id: Optional[UserId] = None
    reason: FlagReason
    # Bounded by CommentSettings.max_flag_message_length in FlagService
    message: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
