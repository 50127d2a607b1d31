"""Domain services."""

from .access_policy import AccessPolicy, OwnedContent
from .comment_service import CommentPage, CommentService
from .flag_service import FlagResult, FlagService, UnflagResult, parse_reason
from .jwt_service import JWTService

__all__ = [
    "AccessPolicy",
    "CommentPage",
    "CommentService",
    "FlagResult",
    "FlagService",
    "JWTService",
    "OwnedContent",
    "UnflagResult",
    "parse_reason",
]
