import time

import pytest

from bookwise_api.app.core.errors import AlreadyExists, InvalidCredentials, Unauthorized
from bookwise_api.app.core.security import create_access_token, decode_access_token


@pytest.mark.asyncio
async def test_login_with_seeded_user(catalog):
    result = await catalog.login("alice@example.com", "password123")
    assert result.user.id == "1"
    assert result.user.name == "Alice"
    assert "password" not in result.user.model_dump()
    assert catalog.authorize(result.token) == "1"


@pytest.mark.asyncio
async def test_login_rejects_wrong_password(catalog):
    with pytest.raises(InvalidCredentials):
        await catalog.login("alice@example.com", "nope")


@pytest.mark.asyncio
async def test_login_rejects_unknown_email(catalog):
    with pytest.raises(InvalidCredentials):
        await catalog.login("nobody@example.com", "password123")


@pytest.mark.asyncio
async def test_signup_then_login(catalog):
    user = await catalog.signup("Carol", "carol@example.com", "secret")
    assert user.id == "2"
    assert user.name == "Carol"
    assert "password" not in user.model_dump()

    result = await catalog.login("carol@example.com", "secret")
    assert result.user.id == user.id


@pytest.mark.asyncio
async def test_signup_rejects_duplicate_email(catalog):
    with pytest.raises(AlreadyExists):
        await catalog.signup("Alice Again", "alice@example.com", "whatever")
    assert len(catalog.store.users) == 1


def test_authorize_rejects_garbage(catalog):
    for token in ("", "mock-jwt-token-for-1", "a.b.c", None):
        with pytest.raises(Unauthorized):
            catalog.authorize(token)


def test_authorize_rejects_tampered_token(catalog, alice_token):
    header, payload, _ = alice_token.split(".")
    forged = create_access_token({"sub": "1"}, secret_key="other-secret")
    with pytest.raises(Unauthorized):
        catalog.authorize(f"{header}.{payload}.{forged.split('.')[2]}")


def test_authorize_rejects_token_for_unknown_user(catalog):
    with pytest.raises(Unauthorized):
        catalog.authorize(catalog.auth.issue_token("42"))


def test_expired_token_does_not_decode():
    token = create_access_token({"sub": "1"}, expires_delta=60)
    payload = decode_access_token(token)
    assert payload["sub"] == "1"
    assert payload["exp"] > time.time()

    stale = create_access_token({"sub": "1"}, expires_delta=-10)
    assert decode_access_token(stale) is None


def test_expired_token_is_unauthorized(catalog):
    stale = create_access_token({"sub": "1"}, expires_delta=-10)
    with pytest.raises(Unauthorized):
        catalog.authorize(stale)
