"""Tests for the session issuer (JWT) and password hashing."""

from __future__ import annotations

import time
import uuid
from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from app.config import get_settings
from app.errors import ExpiredToken, InvalidToken
from app.security.auth import AuthenticatedUser, create_access_token, verify_access_token
from app.security.passwords import hash_password, verify_password

settings = get_settings()
USER_ID = str(uuid.uuid4())


def _ago(**kwargs: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(**kwargs)


class TestIssueAndVerify:
    def test_round_trip_claims(self) -> None:
        token = create_access_token(sub=USER_ID, email="a@example.com")
        user = verify_access_token(token)

        assert isinstance(user, AuthenticatedUser)
        assert user.id == USER_ID
        assert user.email == "a@example.com"
        assert user.exp > time.time()

    def test_expiry_is_24_hours(self) -> None:
        issued = datetime.now(timezone.utc).replace(microsecond=0)
        token = create_access_token(sub=USER_ID, email="e", issued_at=issued)
        payload = pyjwt.decode(token, options={"verify_signature": False})

        assert payload["exp"] - payload["iat"] == 24 * 3600

    def test_accepted_just_before_expiry(self) -> None:
        token = create_access_token(sub=USER_ID, email="e", issued_at=_ago(hours=23, minutes=59))
        assert verify_access_token(token).id == USER_ID

    def test_rejected_just_after_expiry(self) -> None:
        token = create_access_token(sub=USER_ID, email="e", issued_at=_ago(hours=24, minutes=1))
        with pytest.raises(ExpiredToken):
            verify_access_token(token)

    def test_expired_is_a_kind_of_invalid(self) -> None:
        assert issubclass(ExpiredToken, InvalidToken)

    def test_wrong_secret_is_invalid(self) -> None:
        token = pyjwt.encode(
            {"sub": USER_ID, "email": "e", "exp": int(time.time()) + 3600},
            "some-other-secret-some-other-secret",
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken) as exc_info:
            verify_access_token(token)
        assert not isinstance(exc_info.value, ExpiredToken)

    def test_malformed_token_is_invalid(self) -> None:
        with pytest.raises(InvalidToken):
            verify_access_token("not.a.jwt")

    def test_non_uuid_sub_is_invalid(self) -> None:
        token = create_access_token(sub="not-a-uuid", email="e")
        with pytest.raises(InvalidToken) as exc_info:
            verify_access_token(token)
        assert not isinstance(exc_info.value, ExpiredToken)

    def test_sub_is_normalised(self) -> None:
        token = create_access_token(sub=USER_ID.upper(), email="e")
        assert verify_access_token(token).id == USER_ID

    def test_missing_sub_is_invalid(self) -> None:
        token = pyjwt.encode(
            {"email": "e", "exp": int(time.time()) + 3600},
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
        )
        with pytest.raises(InvalidToken):
            verify_access_token(token)


class TestPasswords:
    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert hashed.startswith("$2")

    def test_verify(self) -> None:
        hashed = hash_password("s3cret")
        assert verify_password("s3cret", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_corrupt_hash_fails_closed(self) -> None:
        assert verify_password("s3cret", "not-a-bcrypt-hash") is False
