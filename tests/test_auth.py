"""Tests for the admin authorization gate."""

import threading

import pytest

from wallet_mock.auth import AdminAuthGate, bearer_token
from wallet_mock.errors import AuthError


def test_login_issues_random_tokens(auth, admin_password):
    first = auth.login(admin_password)
    second = auth.login(admin_password)
    assert first and second
    assert first != second
    assert auth.active_sessions() == 2


@pytest.mark.parametrize("password", ["wrong", "", None, "TEST-ADMIN-SECRET", 12345])
def test_login_rejects_bad_password(auth, password):
    with pytest.raises(AuthError, match="Invalid password"):
        auth.login(password)
    assert auth.active_sessions() == 0


def test_authorize_requires_exact_bearer_format(auth, admin_password):
    token = auth.login(admin_password)
    assert auth.authorize(f"Bearer {token}") is True
    assert auth.authorize(token) is False
    assert auth.authorize(f"bearer {token}") is False
    assert auth.authorize(f"Bearer  {token}") is False
    assert auth.authorize("Bearer ") is False
    assert auth.authorize(None) is False
    assert auth.authorize("Bearer admin-token-simulated") is False


def test_tokens_expire(auth, clock, admin_password):
    header = f"Bearer {auth.login(admin_password)}"
    clock.advance(599)
    assert auth.authorize(header) is True
    clock.advance(1)
    assert auth.authorize(header) is False
    assert auth.active_sessions() == 0


def test_require_raises(auth):
    with pytest.raises(AuthError, match="Unauthorized"):
        auth.require("Bearer nope")


def test_logout_revokes_only_that_session(auth, admin_password):
    keep = f"Bearer {auth.login(admin_password)}"
    drop = f"Bearer {auth.login(admin_password)}"
    auth.logout(drop)
    assert auth.authorize(drop) is False
    assert auth.authorize(keep) is True


def test_logout_requires_live_session(auth):
    with pytest.raises(AuthError):
        auth.logout("Bearer unknown")


def test_bearer_token_helper():
    assert bearer_token("Bearer abc") == "abc"
    assert bearer_token("Basic abc") is None
    assert bearer_token("") is None


def test_constructor_validation():
    with pytest.raises(ValueError):
        AdminAuthGate("")
    with pytest.raises(ValueError):
        AdminAuthGate("secret", token_ttl=0)


def test_concurrent_logins_are_all_recorded(auth, admin_password):
    tokens = []
    threads = [threading.Thread(target=lambda: tokens.append(auth.login(admin_password))) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(set(tokens)) == 16
    assert auth.active_sessions() == 16
    assert all(auth.authorize(f"Bearer {token}") for token in tokens)
