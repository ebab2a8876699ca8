# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for members and the member side of tournament entries."""
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from golfclub.core.database import connection_scope
from golfclub.core.errors import ConflictError
from golfclub.core.logging import get_logger
from golfclub.models.domain import Member
from golfclub.models.tables import members, tournament_members, tournaments

logger = get_logger(__name__)

MEMBER_FIELDS = (
    "member_name", "address", "email", "phone_number",
    "membership_start_date", "membership_duration_months", "membership_type",
)


def _row_to_member(row, tournament_ids: List[str]) -> Member:
    data = row._mapping
    return Member(
        id=data["id"],
        tournament_ids=tournament_ids,
        **{field: data[field] for field in MEMBER_FIELDS},
    )


class MemberRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──────────────────────────────────────────────────────────

    def create(self, data: Dict[str, Any]) -> Member:
        """Insert a member under a fresh id; a taken email raises ConflictError."""
        member_id = str(uuid.uuid4())
        values = {field: data.get(field) for field in MEMBER_FIELDS}
        try:
            with self._engine.begin() as conn:
                taken = conn.execute(
                    select(members.c.id).where(members.c.email == values["email"])
                ).first()
                if taken:
                    raise ConflictError(f"Member with email {values['email']} already exists")
                conn.execute(insert(members).values(id=member_id, **values))
                return self._fetch(conn, select(members).where(members.c.id == member_id))[0]
        except IntegrityError as exc:
            # Lost a race against a concurrent insert of the same email.
            logger.warning("Unique violation on member insert: %s", exc.orig)
            raise ConflictError(f"Member with email {values['email']} already exists") from exc

    # ── Read ───────────────────────────────────────────────────────────

    def get(self, member_id: str, conn: Optional[Connection] = None) -> Optional[Member]:
        with connection_scope(self._engine, conn) as c:
            found = self._fetch(c, select(members).where(members.c.id == member_id))
        return found[0] if found else None

    def list_all(self) -> List[Member]:
        with self._engine.connect() as conn:
            return self._fetch(conn, select(members).order_by(members.c.created_at, members.c.id))

    def find_by_name_contains(self, substring: str) -> List[Member]:
        """Case-insensitive substring match on member_name.

        Case folding follows str.lower() for non-ASCII letters too; SQLite
        connections get a matching lower() in golfclub.core.database.
        LIKE wildcards in ``substring`` are escaped and match literally.
        """
        stmt = (
            select(members)
            .where(func.lower(members.c.member_name).contains(substring.lower(), autoescape=True))
            .order_by(members.c.member_name)
        )
        with self._engine.connect() as conn:
            return self._fetch(conn, stmt)

    def find_by_membership_type(self, membership_type: str) -> List[Member]:
        """Case-insensitive exact match on membership_type (str.lower() folding)."""
        stmt = (
            select(members)
            .where(func.lower(members.c.membership_type) == membership_type.lower())
            .order_by(members.c.member_name)
        )
        with self._engine.connect() as conn:
            return self._fetch(conn, stmt)

    def find_by_phone_number(self, phone_number: str) -> Optional[Member]:
        """Exact match; when several members share a number the earliest wins."""
        stmt = (
            select(members)
            .where(members.c.phone_number == phone_number)
            .order_by(members.c.created_at, members.c.id)
            .limit(1)
        )
        with self._engine.connect() as conn:
            found = self._fetch(conn, stmt)
        return found[0] if found else None

    def find_by_enrolled_tournament_start_date(self, start_date: date) -> List[Member]:
        """Distinct members entered in at least one tournament starting on ``start_date``."""
        enrolled = (
            select(tournament_members.c.member_id)
            .join(tournaments, tournaments.c.id == tournament_members.c.tournament_id)
            .where(tournaments.c.start_date == start_date)
        )
        stmt = select(members).where(members.c.id.in_(enrolled)).order_by(members.c.member_name)
        with self._engine.connect() as conn:
            return self._fetch(conn, stmt)

    def find_enrolled_in(self, tournament_id: str, conn: Optional[Connection] = None) -> List[Member]:
        enrolled = (
            select(tournament_members.c.member_id)
            .where(tournament_members.c.tournament_id == tournament_id)
        )
        stmt = select(members).where(members.c.id.in_(enrolled)).order_by(members.c.member_name)
        with connection_scope(self._engine, conn) as c:
            return self._fetch(c, stmt)

    # ── Private ────────────────────────────────────────────────────────

    def _fetch(self, conn: Connection, stmt) -> List[Member]:
        rows = conn.execute(stmt).fetchall()
        enrolled = self._tournament_ids_for(conn, [r._mapping["id"] for r in rows])
        return [_row_to_member(r, enrolled.get(r._mapping["id"], [])) for r in rows]

    @staticmethod
    def _tournament_ids_for(conn: Connection, member_ids: List[str]) -> Dict[str, List[str]]:
        if not member_ids:
            return {}
        rows = conn.execute(
            select(tournament_members.c.member_id, tournament_members.c.tournament_id)
            .where(tournament_members.c.member_id.in_(member_ids))
            .order_by(tournament_members.c.enrolled_at, tournament_members.c.tournament_id)
        ).fetchall()
        result: Dict[str, List[str]] = {}
        for member_id, tournament_id in rows:
            result.setdefault(member_id, []).append(tournament_id)
        return result
