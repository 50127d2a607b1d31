"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from snip.config import AuthSettings, Settings
from snip.domain.model import Snippet
from snip.domain.value import Caller, Role, SnippetId, UserId
from snip.util.jwt import create_token

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_caller(role: Role = Role.USER) -> Caller:
    """Build a caller with a fresh user ID."""
    return Caller(id=UserId(uuid4()), role=role)


def make_snippet(owner: Caller | UserId, is_public: bool = True) -> Snippet:
    """Build a snippet owned by the given caller or user ID."""
    owner_id = owner.id if isinstance(owner, Caller) else owner
    return Snippet(
        id=SnippetId(uuid4()),
        owner_id=owner_id,
        is_public=is_public,
        title="fizzbuzz.py",
        language="python",
    )


def auth_headers(caller: Caller, settings: AuthSettings | None = None) -> dict[str, str]:
    """Bearer authorization header for the caller."""
    token = create_token(str(caller.id), caller.role.value, settings or Settings().auth)
    return {"Authorization": f"Bearer {token}"}
