"""Match Schemas — wire names, defaults and conversion to/from MatchRecord."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from magitrak.core.domain_types import MatchId, MatchRecord, OwnerId
from magitrak.schemas.match import (
    MatchCreate, MatchCreatedResponse, MatchResponse,
)


def test_create_accepts_camel_case():
    body = MatchCreate.model_validate({
        "ownerId": 1, "playerDeck": "burn", "opponentDeck": "bloom",
        "date": "2026-10-18T10:00:00Z", "usedSideboard": True,
        "startingHandSize": 6,
    })
    assert body.owner_id == 1
    assert body.used_sideboard is True
    assert body.starting_hand_size == 6


def test_create_defaults_leave_required_fields_to_validator():
    body = MatchCreate.model_validate({"ownerId": 1})
    assert body.date is None
    assert body.player_deck == ""
    assert body.opponent_deck == ""


def test_create_requires_owner_id():
    with pytest.raises(ValidationError):
        MatchCreate.model_validate({"playerDeck": "burn"})


def test_naive_date_read_as_utc():
    body = MatchCreate.model_validate({"ownerId": 1, "date": "2026-10-18T10:00:00"})
    assert body.date == datetime(2026, 10, 18, 10, tzinfo=timezone.utc)


def test_to_record_copies_every_field():
    body = MatchCreate.model_validate({
        "ownerId": 1, "playerDeck": "twin", "opponentDeck": "burn",
        "date": "2026-10-18T10:00:00Z", "win": False, "reason": "mana screwed",
        "usedSideboard": True, "playedFirst": True, "startingHandSize": 6,
        "landsInOpener": 1, "opponentName": "mangomaster", "notes": "ouch",
    })
    record = body.to_record()
    assert record.id is None
    assert record.owner_id == 1
    assert record.reason == "mana screwed"
    assert record.lands_in_opener == 1
    assert record.opponent_name == "mangomaster"


def test_response_serializes_camel_case():
    record = MatchRecord(
        id=MatchId("abc"), owner_id=OwnerId(1),
        date=datetime(2026, 10, 18, tzinfo=timezone.utc),
        player_deck="burn", opponent_deck="bloom", played_first=True,
    )
    data = MatchResponse.from_record(record).model_dump(by_alias=True)
    assert data["id"] == "abc"
    assert data["ownerId"] == 1
    assert data["playedFirst"] is True
    assert "player_deck" not in data


def test_created_response_uses_match_id_key():
    data = MatchCreatedResponse(match_id=MatchId("abc")).model_dump(by_alias=True)
    assert data == {"MatchId": "abc"}


def test_offset_date_normalised_to_utc():
    body = MatchCreate.model_validate(
        {"ownerId": 1, "date": "2026-10-18T09:00:00+11:00"},
    )
    assert body.date.tzinfo == timezone.utc
    assert body.date == datetime(2026, 10, 17, 22, tzinfo=timezone.utc)


@pytest.mark.parametrize("date", [
    "0001-01-01T00:30:00+01:00",
    "9999-12-31T23:00:00-05:00",
])
def test_date_outside_utc_range_rejected(date):
    with pytest.raises(ValidationError):
        MatchCreate.model_validate({"ownerId": 1, "date": date})


def test_zero_date_parses_for_the_validator():
    body = MatchCreate.model_validate(
        {"ownerId": 1, "date": "0001-01-01T00:00:00Z"},
    )
    assert body.date == datetime(1, 1, 1, tzinfo=timezone.utc)


def test_owner_id_bounded_to_64_bits():
    assert MatchCreate.model_validate({"ownerId": 2**63 - 1}).owner_id == 2**63 - 1
    with pytest.raises(ValidationError):
        MatchCreate.model_validate({"ownerId": 2**63})


def test_null_text_fields_become_empty():
    body = MatchCreate.model_validate({
        "ownerId": 1, "playerDeck": None, "reason": None,
        "opponentName": None, "notes": None,
    })
    assert body.player_deck == ""
    assert body.reason == ""
    assert body.opponent_name == ""
    assert body.notes == ""
