"""SQL Match Repository — MatchRepository implementation over SQLAlchemy async sessions.

Invariants:
    - create() assigns the id; callers never supply one
    - fetch_by_id() returns None only for "no such row"; any SQLAlchemy failure
      raises StoreFailureError after rollback
    - Each mutation commits exactly once
    - Dates are written in UTC and read back timezone-aware

Design Decisions:
    - The only SQLAlchemy → StoreFailureError mapping: the handler must see it before
      the response is built, not during dependency teardown
"""

import logging
from datetime import datetime, timezone
from typing import NoReturn

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from magitrak.core.domain_types import MatchId, MatchRecord, OwnerId
from magitrak.core.errors import StoreFailureError, ErrorContext
from magitrak.models.match import Match, new_match_id

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_row(record: MatchRecord, match_id: str) -> Match:
    return Match(
        id=match_id,
        owner_id=record.owner_id,
        date=_as_utc(record.date),
        player_deck=record.player_deck,
        opponent_deck=record.opponent_deck,
        win=record.win,
        reason=record.reason,
        used_sideboard=record.used_sideboard,
        played_first=record.played_first,
        starting_hand_size=record.starting_hand_size,
        lands_in_opener=record.lands_in_opener,
        opponent_name=record.opponent_name,
        notes=record.notes,
    )


def _to_record(row: Match) -> MatchRecord:
    return MatchRecord(
        id=MatchId(row.id),
        owner_id=OwnerId(row.owner_id),
        date=_as_utc(row.date),
        player_deck=row.player_deck,
        opponent_deck=row.opponent_deck,
        win=row.win,
        reason=row.reason,
        used_sideboard=row.used_sideboard,
        played_first=row.played_first,
        starting_hand_size=row.starting_hand_size,
        lands_in_opener=row.lands_in_opener,
        opponent_name=row.opponent_name,
        notes=row.notes,
    )


class SqlMatchRepository:
    """Match persistence backed by one request-scoped AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, record: MatchRecord) -> MatchId:
        match_id = new_match_id()
        try:
            self.db.add(_to_row(record, match_id))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(e, "insert", match_id)
        return MatchId(match_id)

    async def fetch_by_id(self, match_id: MatchId) -> MatchRecord | None:
        try:
            result = await self.db.execute(
                select(Match).where(Match.id == match_id),
            )
        except SQLAlchemyError as e:
            await self._fail(e, "fetch", match_id)
        row = result.scalar_one_or_none()
        return _to_record(row) if row else None

    async def delete_by_id(self, match_id: MatchId) -> bool:
        try:
            result = await self.db.execute(
                delete(Match).where(Match.id == match_id),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(e, "delete", match_id)
        return result.rowcount == 1

    async def list_by_owner(self, owner_id: OwnerId) -> list[MatchRecord]:
        try:
            result = await self.db.execute(
                select(Match)
                .where(Match.owner_id == owner_id)
                .order_by(Match.date.desc()),
            )
        except SQLAlchemyError as e:
            await self._fail(e, "list")
        return [_to_record(row) for row in result.scalars().all()]

    async def _fail(
        self, exc: SQLAlchemyError, operation: str, match_id: str | None = None,
    ) -> NoReturn:
        await self.db.rollback()
        logger.error(
            f"Match store {operation} failed: {exc}",
            extra={"match_id": match_id, "operation": operation},
            exc_info=True,
        )
        raise StoreFailureError(
            "Database operation failed", operation,
            ErrorContext(match_id=match_id),
        ) from exc
