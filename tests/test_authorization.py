"""Tests for the authorization gate."""

import pytest

from yoga_studio.domain.errors import Forbidden, Unauthenticated
from yoga_studio.services.authorization import AuthorizationGate
from yoga_studio.services.tokens import TokenService
from tests.conftest import TEST_SECRET, InMemoryUserRepository


def _gate(allow_self_promotion: bool = False) -> tuple[AuthorizationGate, InMemoryUserRepository]:
    repository = InMemoryUserRepository()
    gate = AuthorizationGate(
        tokens=TokenService(secret_key=TEST_SECRET),
        users=repository,
        allow_self_promotion=allow_self_promotion,
    )
    return gate, repository


def test_require_authenticated_resolves_bearer_token() -> None:
    gate, _ = _gate()
    token = gate.tokens.issue_token(5)

    assert gate.require_authenticated(f"Bearer {token}") == 5


@pytest.mark.parametrize(
    ("header", "message"),
    [
        (None, "No token provided"),
        ("", "No token provided"),
        ("Bearer", "Invalid token format"),
        ("Basic abc", "Invalid token format"),
        ("Bearer garbage", "Invalid or expired token"),
    ],
)
def test_require_authenticated_rejects_bad_headers(header, message) -> None:  # type: ignore[no-untyped-def]
    gate, _ = _gate()

    with pytest.raises(Unauthenticated, match=message):
        gate.require_authenticated(header)


def test_require_admin() -> None:
    gate, repository = _gate()
    member = repository.create_user("user@test.com", "hash", "John", "Doe")
    admin = repository.set_admin(
        repository.create_user("yoga@studio.com", "hash", "Admin", "Yoga").id, True
    )

    assert gate.require_admin(admin.id) == admin
    with pytest.raises(Forbidden, match="Admin access required"):
        gate.require_admin(member.id)
    with pytest.raises(Forbidden):
        gate.require_admin(999)


def test_require_self() -> None:
    AuthorizationGate.require_self(3, 3)

    with pytest.raises(Forbidden, match="only delete your own account"):
        AuthorizationGate.require_self(3, 4)


def test_self_promotion_allowed_only_in_development() -> None:
    dev_gate, dev_repository = _gate(allow_self_promotion=True)
    user = dev_repository.create_user("user@test.com", "hash", "John", "Doe")

    promoted = dev_gate.promote_self(user.id)

    assert promoted.admin is True

    prod_gate, prod_repository = _gate(allow_self_promotion=False)
    other = prod_repository.create_user("user@test.com", "hash", "John", "Doe")
    with pytest.raises(Forbidden):
        prod_gate.promote_self(other.id)
    assert prod_repository.get_by_id(other.id).admin is False


def test_self_promotion_of_missing_user_is_unauthenticated() -> None:
    gate, _ = _gate(allow_self_promotion=True)

    with pytest.raises(Unauthenticated):
        gate.promote_self(404)
