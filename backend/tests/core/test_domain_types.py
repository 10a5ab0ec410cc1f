"""Domain Types — verifies identity wrappers and the MatchRecord value object."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from magitrak.core.domain_types import (
    DELETE_ACKNOWLEDGEMENT, Identity, MatchId, MatchRecord, OwnerId,
    ZERO_TIMESTAMP,
)


def _record() -> MatchRecord:
    return MatchRecord(
        owner_id=OwnerId(1),
        date=datetime(2026, 10, 18, tzinfo=timezone.utc),
        player_deck="burn",
        opponent_deck="bloom",
    )


def test_identity_types_wrap_primitives():
    assert MatchId("abc") == "abc"
    assert OwnerId(3) == 3
    assert Identity(owner_id=OwnerId(3)).owner_id == 3


def test_record_defaults():
    record = _record()
    assert record.id is None
    assert record.win is False
    assert record.starting_hand_size == 0
    assert record.notes == ""


def test_with_id_returns_copy():
    record = _record()
    stored = record.with_id(MatchId("abc"))
    assert stored.id == "abc"
    assert record.id is None
    assert stored.player_deck == record.player_deck


def test_record_is_immutable():
    with pytest.raises(FrozenInstanceError):
        _record().owner_id = OwnerId(2)


def test_zero_timestamp_is_year_one_utc():
    assert ZERO_TIMESTAMP.year == 1
    assert ZERO_TIMESTAMP.tzinfo is timezone.utc


def test_delete_acknowledgement_literal():
    assert DELETE_ACKNOWLEDGEMENT == "delete success!"
