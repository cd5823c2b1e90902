"""Tests for bearer token handling."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from yoga_studio.domain.errors import Unauthenticated
from yoga_studio.services.tokens import TokenService
from tests.conftest import TEST_SECRET

FAR_FUTURE = datetime(2100, 1, 1, tzinfo=UTC)


def test_issued_token_round_trips_user_id() -> None:
    service = TokenService(secret_key=TEST_SECRET)

    token = service.issue_token(42)

    assert service.verify_token(token) == 42


def test_token_expires_after_24_hours() -> None:
    service = TokenService(secret_key=TEST_SECRET)

    payload = jwt.decode(service.issue_token(7), TEST_SECRET, algorithms=["HS256"])

    assert payload["userId"] == 7
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60


def test_expired_token_is_rejected() -> None:
    service = TokenService(secret_key=TEST_SECRET)
    past = datetime.now(tz=UTC) - timedelta(hours=25)
    token = jwt.encode(
        {"userId": 1, "iat": past, "exp": past + timedelta(hours=24)},
        TEST_SECRET,
        algorithm="HS256",
    )

    with pytest.raises(Unauthenticated, match="Invalid or expired token"):
        service.verify_token(token)


@pytest.mark.parametrize(
    "token",
    [
        "not-a-token",
        jwt.encode({"userId": 1}, "another-secret-key-with-enough-bytes!!", algorithm="HS256"),
        jwt.encode({"sub": "someone"}, TEST_SECRET, algorithm="HS256"),
        jwt.encode({"userId": "1", "exp": FAR_FUTURE}, TEST_SECRET, algorithm="HS256"),
    ],
)
def test_bad_tokens_collapse_to_one_error(token: str) -> None:
    service = TokenService(secret_key=TEST_SECRET)

    with pytest.raises(Unauthenticated) as excinfo:
        service.verify_token(token)

    assert excinfo.value.message == "Invalid or expired token"


def test_token_without_expiry_is_rejected() -> None:
    service = TokenService(secret_key=TEST_SECRET)
    token = jwt.encode({"userId": 1}, TEST_SECRET, algorithm="HS256")

    with pytest.raises(Unauthenticated, match="Invalid or expired token"):
        service.verify_token(token)
