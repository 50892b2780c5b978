"""Basic unit tests for cactive-hypixel-api package."""

import pytest

from cactive_hypixel import (
    AsyncHypixelClient,
    HypixelClient,
    HypixelAPIError,
    TransportError,
    DecodeError,
    APIResponseError,
    NormalizedError,
    StaffFilter,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert HypixelClient is not None
    assert AsyncHypixelClient is not None


def test_error_hierarchy():
    assert issubclass(TransportError, HypixelAPIError)
    assert issubclass(DecodeError, HypixelAPIError)
    assert issubclass(APIResponseError, HypixelAPIError)


def test_internal_error_attributes():
    err = TransportError("connection refused")
    assert str(err) == "connection refused"
    assert err.type == "failed-api-request"
    assert err.code == 500
    assert err.internal is True
    assert err.errors == [NormalizedError(
        type="failed-api-request", code=500, message="connection refused", internal=True,
    )]


def test_api_error_attributes_follow_first_entry():
    err = APIResponseError([
        NormalizedError(type="invalid-key", code=401, message="bad key", internal=False),
        NormalizedError(type="throttle", code=429, message="slow down", internal=False),
    ])
    assert str(err) == "bad key"
    assert err.code == 401
    assert err.internal is False
    assert len(err.errors) == 2


def test_error_requires_entries():
    with pytest.raises(ValueError):
        HypixelAPIError([])


def test_staff_filter_values():
    assert StaffFilter.ALL == "all"
    assert StaffFilter.ONLINE == "online"
    assert StaffFilter.OFFLINE == "offline"


def test_client_stores_key_and_cache_verbatim():
    client = HypixelClient("not a real key!", True)
    try:
        assert client.api_key == "not a real key!"
        assert client.prefer_cache is True
    finally:
        client.close()
