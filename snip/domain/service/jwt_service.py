"""JWT token domain service."""

from uuid import UUID

import logfire
from pydantic import ValidationError

from snip.config import AuthSettings
from snip.domain.value import Caller, Role, UserId
from snip.util.jwt import JWTError, TokenPayload, create_token, verify_token


class JWTService:
    """Domain service resolving caller identities from JWT tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, role: Role = Role.USER) -> str:
        """Create JWT token for a user.

        Used by tests and tooling; production tokens come from the identity
        service.

        Args:
            user_id: User ID
            role: User role

        Returns:
            JWT token string
        """
        return create_token(str(user_id), role.value, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_caller_from_token(self, token: str | None) -> Caller | None:
        """Resolve the caller from a JWT token without raising.

        Missing, invalid or expired tokens, and tokens with a malformed
        user id or unknown role, are all treated as anonymous.

        Args:
            token: JWT token string (optional)

        Returns:
            Caller if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Caller(id=UserId(UUID(payload.user_id)), role=Role(payload.role))
        except (JWTError, ValueError, ValidationError) as e:
            logfire.debug(
                "JWT verification failed, treating as anonymous", error=str(e)
            )
            return None
