"""Token handling, role parsing and environment-driven settings."""

import asyncio
from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import ValidationError

from app.core.config import _parse_bool
from shared.auth.dependencies import get_current_user, require_roles
from shared.auth.models import Role, TokenData
from shared.auth.utils import create_access_token, decode_access_token
from shared.utils.errors import AuthenticationError, AuthorizationError
from shared.utils.config import Settings


def _run(coroutine):
    return asyncio.run(coroutine)


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.mark.unit
class TestRole:
    def test_plain_and_prefixed_names(self):
        assert Role.parse("MANAGER") is Role.MANAGER
        assert Role.parse("ROLE_MANAGER") is Role.MANAGER
        assert Role.parse(" role_admin ") is Role.ADMIN

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValueError):
            Role.parse("AUDITOR")


@pytest.mark.unit
class TestTokens:
    def test_round_trip_keeps_subject_and_role(self):
        token = create_access_token("12", "priya", Role.MANAGER)
        payload = decode_access_token(token)

        assert payload["sub"] == "12"
        assert payload["role"] == "MANAGER"
        assert payload["type"] == "access"

    def test_garbage_token_decodes_to_none(self):
        assert decode_access_token("not-a-jwt") is None

    def test_expired_token_decodes_to_none(self):
        token = create_access_token("12", "priya", Role.ADMIN, expires_delta=timedelta(seconds=-5))
        assert decode_access_token(token) is None

    def test_current_user_from_token(self):
        token = create_access_token("3", "sam", Role.EMPLOYEE)
        user = _run(get_current_user(_bearer(token)))

        assert user == TokenData(user_id="3", username="sam", role=Role.EMPLOYEE)

    def test_missing_credentials_is_401(self):
        with pytest.raises(AuthenticationError) as excinfo:
            _run(get_current_user(None))
        assert excinfo.value.status_code == 401


@pytest.mark.unit
class TestRequireRoles:
    def test_allowed_role_passes_through(self):
        verify = require_roles(Role.ADMIN, Role.MANAGER)
        user = TokenData(user_id="1", username="a", role=Role.MANAGER)
        assert _run(verify(user)) is user

    def test_other_role_is_403(self):
        verify = require_roles(Role.ADMIN)
        user = TokenData(user_id="1", username="a", role=Role.MANAGER)

        with pytest.raises(AuthorizationError) as excinfo:
            _run(verify(user))
        assert excinfo.value.status_code == 403


@pytest.mark.unit
class TestSettings:
    def test_cors_origins_from_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
        assert Settings().cors_allow_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_from_json_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["http://a.test"]')
        assert Settings().cors_allow_origins == ["http://a.test"]

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings()

    def test_async_database_url(self, monkeypatch):
        monkeypatch.setenv("POSTGRES_URL", "postgresql://u:p@db:5432/wellness")
        assert Settings().postgres_async_url == "postgresql+asyncpg://u:p@db:5432/wellness"


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,default,expected",
    [(None, True, True), ("false", True, False), ("YES", False, True), ("0", True, False)],
)
def test_parse_bool(raw, default, expected):
    assert _parse_bool(raw, default) is expected
