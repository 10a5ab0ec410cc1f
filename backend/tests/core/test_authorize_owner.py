"""Ownership Authorization — tests for the pure owner equality guard."""

import pytest

from magitrak.core.authorize_owner import authorize_owner, is_owner
from magitrak.core.domain_types import MatchId, OwnerId
from magitrak.core.errors import OwnershipMismatchError


def test_same_owner_is_owner():
    assert is_owner(OwnerId(1), OwnerId(1))


def test_different_owner_is_not_owner():
    assert not is_owner(OwnerId(1), OwnerId(2))


def test_authorize_owner_allows_match():
    assert authorize_owner(OwnerId(7), OwnerId(7)) is None


def test_authorize_owner_rejects_mismatch_as_400():
    with pytest.raises(OwnershipMismatchError) as exc_info:
        authorize_owner(OwnerId(2), OwnerId(1), MatchId("abc"))
    err = exc_info.value
    assert err.http_status == 400
    assert err.code == "OWNERSHIP_MISMATCH"
    assert err.context.owner_id == 2
    assert err.context.match_id == "abc"
