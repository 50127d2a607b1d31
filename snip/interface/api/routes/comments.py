"""Comment routes.

Domain errors raised by the use cases are turned into responses by the
handlers in snip.interface.api.errors.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, Response, status
from pydantic import BaseModel

from snip.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    FlagCommentRequest,
    FlagCommentResponse,
    FlagCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListFlagsRequest,
    ListFlagsResponse,
    ListFlagsUseCase,
    UnflagCommentRequest,
    UnflagCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from snip.domain.service import JWTService
from snip.domain.value import Caller, SortOrder

snippet_router = APIRouter(
    prefix="/snippets", tags=["comments"], route_class=DishkaRoute
)
router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)

_BEARER = "bearer "


def resolve_caller(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> Caller | None:
    """Resolve the caller from the auth cookie or a bearer header.

    The cookie wins when both are present. Invalid tokens resolve to an
    anonymous caller.
    """
    token = auth_token
    if not token and authorization and authorization.lower().startswith(_BEARER):
        token = authorization[len(_BEARER) :].strip()
    return jwt_service.get_caller_from_token(token)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    body: str


class FlagCommentAPIRequest(BaseModel):
    """API request for flagging a comment."""

    reason: str
    message: str | None = None


@snippet_router.post(
    "/{snippet_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    snippet_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment on a snippet or reply to another comment.

    Requires authentication.

    Args:
        snippet_id: Snippet UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created comment details
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            snippet_id=snippet_id,
            body=request.body,
            parent_id=request.parent_id,
            caller=caller,
        )
    )


@snippet_router.get("/{snippet_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    snippet_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    parent_id: str | None = Query(default=None),
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    order: SortOrder = Query(default=SortOrder.ASC),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListCommentsResponse:
    """List top-level comments of a snippet, or the replies to parent_id.

    Out-of-range page and limit values are clamped rather than rejected.

    Returns:
        Comments with pagination metadata
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            snippet_id=snippet_id,
            parent_id=parent_id,
            page=page,
            limit=limit,
            order=order,
            caller=caller,
        )
    )


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCommentResponse:
    """Get a single comment.

    Deleted and hidden comments are only returned to their author or an admin.
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)
    return await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id, caller=caller)
    )


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Replace a comment's body.

    Only the author or an admin can edit.

    Args:
        comment_id: Comment UUID
        request: Update data (new body)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Updated comment details
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(comment_id=comment_id, body=request.body, caller=caller)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Soft-delete a comment. Repeated deletes also return 204."""
    caller = resolve_caller(jwt_service, auth_token, authorization)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, caller=caller)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{comment_id}/flags", response_model=FlagCommentResponse)
async def flag_comment(
    comment_id: str,
    request: FlagCommentAPIRequest,
    flag_comment_use_case: FromDishka[FlagCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> FlagCommentResponse:
    """Flag a comment for moderators.

    Anonymous flags are accepted. Flagging twice with the same reason
    succeeds without recording a second flag.
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)
    return await flag_comment_use_case.execute(
        FlagCommentRequest(
            comment_id=comment_id,
            reason=request.reason,
            message=request.message,
            caller=caller,
        )
    )


@router.delete(
    "/{comment_id}/flags/{reason}", status_code=status.HTTP_204_NO_CONTENT
)
async def unflag_comment(
    comment_id: str,
    reason: str,
    unflag_comment_use_case: FromDishka[UnflagCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Withdraw the caller's flag. Returns 204 even if no flag existed."""
    caller = resolve_caller(jwt_service, auth_token, authorization)
    await unflag_comment_use_case.execute(
        UnflagCommentRequest(comment_id=comment_id, reason=reason, caller=caller)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{comment_id}/flags", response_model=ListFlagsResponse)
async def list_flags(
    comment_id: str,
    list_flags_use_case: FromDishka[ListFlagsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListFlagsResponse:
    """List the flags on a comment. Moderators and admins only."""
    caller = resolve_caller(jwt_service, auth_token, authorization)
    return await list_flags_use_case.execute(
        ListFlagsRequest(comment_id=comment_id, caller=caller)
    )
