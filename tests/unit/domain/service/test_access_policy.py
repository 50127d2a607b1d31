"""Unit tests for AccessPolicy."""

from uuid import uuid4

import pytest

from snip.domain.error import NotFoundError
from snip.domain.model import Comment
from snip.domain.service import AccessPolicy
from snip.domain.value import CommentId, Role, SnippetId
from tests.conftest import make_caller, make_snippet


@pytest.fixture
def policy() -> AccessPolicy:
    return AccessPolicy()


class TestCanRead:
    """Tests for can_read."""

    def test_public_snippet_readable_by_anonymous(self, policy):
        snippet = make_snippet(make_caller(), is_public=True)

        assert policy.can_read(snippet, None) is True

    def test_private_snippet_not_readable_by_anonymous(self, policy):
        snippet = make_snippet(make_caller(), is_public=False)

        assert policy.can_read(snippet, None) is False

    def test_private_snippet_readable_by_owner(self, policy):
        owner = make_caller()
        snippet = make_snippet(owner, is_public=False)

        assert policy.can_read(snippet, owner) is True

    def test_private_snippet_not_readable_by_other_user(self, policy):
        snippet = make_snippet(make_caller(), is_public=False)

        assert policy.can_read(snippet, make_caller()) is False

    def test_private_snippet_readable_by_admin(self, policy):
        snippet = make_snippet(make_caller(), is_public=False)

        assert policy.can_read(snippet, make_caller(Role.ADMIN)) is True

    def test_moderator_role_grants_no_read_access(self, policy):
        """Only ADMIN bypasses ownership."""
        snippet = make_snippet(make_caller(), is_public=False)

        assert policy.can_read(snippet, make_caller(Role.MODERATOR)) is False


class TestCanWriteOrAdminister:
    """Tests for can_write_or_administer."""

    def test_public_visibility_grants_no_write(self, policy):
        snippet = make_snippet(make_caller(), is_public=True)

        assert policy.can_write_or_administer(snippet, make_caller()) is False
        assert policy.can_write_or_administer(snippet, None) is False

    def test_owner_and_admin_can_write(self, policy):
        owner = make_caller()
        snippet = make_snippet(owner, is_public=False)

        assert policy.can_write_or_administer(snippet, owner) is True
        assert policy.can_write_or_administer(snippet, make_caller(Role.ADMIN)) is True


class TestAssertions:
    """Tests for assert_readable and assert_owner_or_admin."""

    def test_missing_and_private_raise_identical_errors(self, policy):
        """A missing item and a private one must be indistinguishable."""
        # Arrange
        private = make_snippet(make_caller(), is_public=False)
        stranger = make_caller()

        # Act
        with pytest.raises(NotFoundError) as missing_exc:
            policy.assert_readable(None, stranger)
        with pytest.raises(NotFoundError) as private_exc:
            policy.assert_readable(private, stranger)

        # Assert
        assert str(missing_exc.value) == str(private_exc.value)
        assert str(private.id) not in str(private_exc.value)

    def test_assert_readable_passes_for_public(self, policy):
        policy.assert_readable(make_snippet(make_caller()), None)

    def test_assert_owner_or_admin_rejects_non_owner_as_not_found(self, policy):
        snippet = make_snippet(make_caller(), is_public=True)

        with pytest.raises(NotFoundError):
            policy.assert_owner_or_admin(snippet, make_caller())

    def test_assert_owner_or_admin_passes_for_owner(self, policy):
        owner = make_caller()

        policy.assert_owner_or_admin(make_snippet(owner), owner)


class TestCommentManagement:
    """Tests for can_manage_comment and can_moderate."""

    def _comment(self, author_id=None) -> Comment:
        return Comment(
            id=CommentId(uuid4()),
            snippet_id=SnippetId(uuid4()),
            author_id=author_id,
            body="Nice",
        )

    def test_author_can_manage(self, policy):
        author = make_caller()

        assert policy.can_manage_comment(self._comment(author.id), author) is True

    def test_other_user_cannot_manage(self, policy):
        comment = self._comment(make_caller().id)

        assert policy.can_manage_comment(comment, make_caller()) is False

    def test_anonymous_comment_is_owned_by_nobody(self, policy):
        comment = self._comment(author_id=None)

        assert policy.can_manage_comment(comment, make_caller()) is False
        assert policy.can_manage_comment(comment, None) is False
        assert policy.can_manage_comment(comment, make_caller(Role.ADMIN)) is True

    def test_can_moderate_roles(self, policy):
        assert policy.can_moderate(make_caller(Role.MODERATOR)) is True
        assert policy.can_moderate(make_caller(Role.ADMIN)) is True
        assert policy.can_moderate(make_caller(Role.USER)) is False
        assert policy.can_moderate(None) is False
