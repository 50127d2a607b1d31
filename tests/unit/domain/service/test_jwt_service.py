"""Unit tests for JWTService."""

from uuid import uuid4

import jwt
import pytest

from snip.config import AuthSettings
from snip.domain.service import JWTService
from snip.domain.value import Role, UserId
from snip.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestGetCallerFromToken:
    """Tests for get_caller_from_token."""

    def test_valid_token_resolves_caller(self, jwt_service):
        user_id = UserId(uuid4())
        token = jwt_service.create_token(user_id, Role.MODERATOR)

        caller = jwt_service.get_caller_from_token(token)

        assert caller is not None
        assert caller.id == user_id
        assert caller.role == Role.MODERATOR

    def test_missing_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_caller_from_token(None) is None
        assert jwt_service.get_caller_from_token("") is None

    def test_garbage_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_caller_from_token("not-a-jwt") is None

    def test_token_signed_with_other_secret_is_anonymous(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(UserId(uuid4()))

        assert jwt_service.get_caller_from_token(token) is None

    def test_unknown_role_is_anonymous(self, jwt_service):
        token = jwt.encode(
            {"user_id": str(uuid4()), "role": "OVERLORD", "exp": 4102444800},
            "test-secret",
            algorithm="HS256",
        )

        assert jwt_service.get_caller_from_token(token) is None

    def test_malformed_user_id_is_anonymous(self, jwt_service):
        token = jwt.encode(
            {"user_id": "bob", "role": "USER", "exp": 4102444800},
            "test-secret",
            algorithm="HS256",
        )

        assert jwt_service.get_caller_from_token(token) is None


class TestVerifyToken:
    """Tests for verify_token."""

    def test_expired_token_raises(self):
        service = JWTService(AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1))
        token = service.create_token(UserId(uuid4()))

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_token_without_user_id_raises(self, jwt_service):
        token = jwt.encode(
            {"role": "USER", "exp": 4102444800}, "test-secret", algorithm="HS256"
        )

        with pytest.raises(JWTError, match="missing required claims"):
            jwt_service.verify_token(token)
