# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for tournaments and the tournament_members join."""
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func, insert, select, text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from golfclub.core.database import connection_scope
from golfclub.models.domain import Tournament
from golfclub.models.tables import tournament_members, tournaments

TOURNAMENT_FIELDS = ("start_date", "end_date", "location", "entry_fee", "cash_prize_amount")


def _row_to_tournament(row, member_ids: List[str]) -> Tournament:
    data = row._mapping
    return Tournament(
        id=data["id"],
        member_ids=member_ids,
        **{field: data[field] for field in TOURNAMENT_FIELDS},
    )


class TournamentRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──────────────────────────────────────────────────────────

    def create(self, data: Dict[str, Any]) -> Tournament:
        """Insert a tournament and return it as stored (money at 2 places)."""
        tournament_id = str(uuid.uuid4())
        values = {field: data.get(field) for field in TOURNAMENT_FIELDS}
        with self._engine.begin() as conn:
            conn.execute(insert(tournaments).values(id=tournament_id, **values))
            return self._fetch(conn, select(tournaments).where(tournaments.c.id == tournament_id))[0]

    def add_member(self, conn: Connection, tournament_id: str, member_id: str) -> bool:
        """Record an entry inside the caller's transaction.

        Returns False when the pair is already present; nothing is written then.
        The insert itself ignores a duplicate key, so two concurrent
        enrollments of the same pair both succeed.
        """
        values = {"tournament_id": tournament_id, "member_id": member_id}
        dialect = conn.dialect.name
        if dialect == "postgresql":
            stmt = pg_insert(tournament_members).values(**values).on_conflict_do_nothing()
        elif dialect == "sqlite":
            stmt = sqlite_insert(tournament_members).values(**values).on_conflict_do_nothing()
        else:
            try:
                with conn.begin_nested():
                    conn.execute(insert(tournament_members).values(**values))
            except IntegrityError:
                return False
            return True
        return conn.execute(stmt).rowcount == 1

    # ── Read ───────────────────────────────────────────────────────────

    def get(self, tournament_id: str, conn: Optional[Connection] = None,
            for_update: bool = False) -> Optional[Tournament]:
        stmt = select(tournaments).where(tournaments.c.id == tournament_id)
        if for_update:
            # Rendered as FOR UPDATE on PostgreSQL; SQLite serialises writers itself.
            stmt = stmt.with_for_update()
        with connection_scope(self._engine, conn) as c:
            found = self._fetch(c, stmt)
        return found[0] if found else None

    def list_all(self) -> List[Tournament]:
        with self._engine.connect() as conn:
            return self._fetch(
                conn, select(tournaments).order_by(tournaments.c.start_date, tournaments.c.id)
            )

    def find_by_start_date(self, start_date: date) -> List[Tournament]:
        """Exact match on start_date."""
        stmt = (
            select(tournaments)
            .where(tournaments.c.start_date == start_date)
            .order_by(tournaments.c.location)
        )
        with self._engine.connect() as conn:
            return self._fetch(conn, stmt)

    def find_by_location_contains(self, substring: str) -> List[Tournament]:
        """Case-insensitive substring match on location, wildcards escaped.

        Folding follows str.lower(), non-ASCII included.
        """
        stmt = (
            select(tournaments)
            .where(func.lower(tournaments.c.location).contains(substring.lower(), autoescape=True))
            .order_by(tournaments.c.start_date)
        )
        with self._engine.connect() as conn:
            return self._fetch(conn, stmt)

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    # ── Private ────────────────────────────────────────────────────────

    def _fetch(self, conn: Connection, stmt) -> List[Tournament]:
        rows = conn.execute(stmt).fetchall()
        entered = self._member_ids_for(conn, [r._mapping["id"] for r in rows])
        return [_row_to_tournament(r, entered.get(r._mapping["id"], [])) for r in rows]

    @staticmethod
    def _member_ids_for(conn: Connection, tournament_ids: List[str]) -> Dict[str, List[str]]:
        if not tournament_ids:
            return {}
        rows = conn.execute(
            select(tournament_members.c.tournament_id, tournament_members.c.member_id)
            .where(tournament_members.c.tournament_id.in_(tournament_ids))
            .order_by(tournament_members.c.enrolled_at, tournament_members.c.member_id)
        ).fetchall()
        result: Dict[str, List[str]] = {}
        for tournament_id, member_id in rows:
            result.setdefault(tournament_id, []).append(member_id)
        return result
