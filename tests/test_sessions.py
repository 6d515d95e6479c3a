"""Tests for the in-memory session registry"""
from unittest.mock import patch

from storefront.sessions import SessionStore


def make_store(ttl=60):
    return SessionStore(list, ttl_seconds=ttl)


def test_get_or_create_issues_token():
    store = make_store()
    token, state = store.get_or_create(None)

    assert token
    assert state == []
    assert len(store) == 1


def test_same_token_returns_same_state():
    store = make_store()
    token, state = store.get_or_create(None)
    state.append("item")

    again_token, again = store.get_or_create(token)

    assert again_token == token
    assert again is state


def test_unknown_token_gets_new_session():
    store = make_store()
    token, _ = store.get_or_create("forged-token")

    assert token != "forged-token"
    assert store.get("forged-token") is None


def test_sessions_expire_when_idle():
    store = make_store(ttl=10)
    with patch("storefront.sessions.time.monotonic", return_value=100.0):
        token, _ = store.get_or_create(None)

    with patch("storefront.sessions.time.monotonic", return_value=105.0):
        assert store.get(token) is not None

    # Idle timer was refreshed at 105
    with patch("storefront.sessions.time.monotonic", return_value=114.0):
        assert store.get(token) is not None

    with patch("storefront.sessions.time.monotonic", return_value=200.0):
        assert store.get(token) is None
    assert len(store) == 0


def test_purge_expired():
    store = make_store(ttl=10)
    with patch("storefront.sessions.time.monotonic", return_value=0.0):
        store.get_or_create(None)
        store.get_or_create(None)

    with patch("storefront.sessions.time.monotonic", return_value=50.0):
        assert store.purge_expired() == 2
    assert len(store) == 0


def test_discard():
    store = make_store()
    token, _ = store.get_or_create(None)
    store.discard(token)
    store.discard("never-existed")

    assert store.get(token) is None
