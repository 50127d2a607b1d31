"""Comment use cases."""

from .common import CommentItem
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .flag_comment import FlagCommentRequest, FlagCommentResponse, FlagCommentUseCase
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .list_flags import FlagItem, ListFlagsRequest, ListFlagsResponse, ListFlagsUseCase
from .unflag_comment import (
    UnflagCommentRequest,
    UnflagCommentResponse,
    UnflagCommentUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "FlagCommentRequest",
    "FlagCommentResponse",
    "FlagCommentUseCase",
    "FlagItem",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ListFlagsRequest",
    "ListFlagsResponse",
    "ListFlagsUseCase",
    "UnflagCommentRequest",
    "UnflagCommentResponse",
    "UnflagCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
