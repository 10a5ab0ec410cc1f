"""Cookie Session Provider — resolves request.session to an Identity or None."""

from starlette.requests import Request

from magitrak.infrastructure.session_provider import CookieSessionProvider


def _request(session: dict | None) -> Request:
    scope = {"type": "http", "method": "GET", "path": "/", "headers": []}
    if session is not None:
        scope["session"] = session
    return Request(scope)


def test_resolves_integer_user_id():
    identity = CookieSessionProvider().resolve_identity(_request({"user_id": 5}))
    assert identity.owner_id == 5


def test_resolves_numeric_string_user_id():
    identity = CookieSessionProvider().resolve_identity(_request({"user_id": "5"}))
    assert identity.owner_id == 5


def test_custom_user_key():
    provider = CookieSessionProvider(user_key="uid")
    assert provider.resolve_identity(_request({"uid": 3})).owner_id == 3
    assert provider.resolve_identity(_request({"user_id": 3})) is None


def test_no_session_middleware_returns_none():
    assert CookieSessionProvider().resolve_identity(_request(None)) is None


def test_empty_session_returns_none():
    assert CookieSessionProvider().resolve_identity(_request({})) is None


def test_non_integer_user_id_returns_none():
    provider = CookieSessionProvider()
    assert provider.resolve_identity(_request({"user_id": "abc"})) is None
    assert provider.resolve_identity(_request({"user_id": True})) is None
    assert provider.resolve_identity(_request({"user_id": [1]})) is None


def test_user_id_outside_64_bit_range_returns_none():
    provider = CookieSessionProvider()
    assert provider.resolve_identity(_request({"user_id": 2**63})) is None
    assert provider.resolve_identity(_request({"user_id": -(2**63) - 1})) is None
    assert provider.resolve_identity(_request({"user_id": 2**63 - 1})).owner_id == 2**63 - 1
