# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Enrollment: links a member to a tournament.

The tournament_members row is the only record of an entry. A member's
tournament list is read back from that table, so there is no second copy
to keep in step.

    validating inputs ─► mutating association ─► committed
            └──────────────── rollback ◄──────────────┘
"""
from typing import Tuple

from sqlalchemy.engine import Engine

from golfclub.core.errors import NotFoundError
from golfclub.core.logging import get_logger
from golfclub.metrics import ENROLLMENTS
from golfclub.models.domain import Member, Tournament
from golfclub.repositories.member_repository import MemberRepository
from golfclub.repositories.tournament_repository import TournamentRepository

logger = get_logger(__name__)


class EnrollmentService:
    def __init__(self, engine: Engine, members: MemberRepository,
                 tournaments: TournamentRepository):
        self._engine = engine
        self._members = members
        self._tournaments = tournaments

    def enroll(self, tournament_id: str, member_id: str) -> Tournament:
        """Enter a member in a tournament; repeating an enrollment is a no-op.

        Runs as one transaction: the tournament row is locked, both ids are
        checked (tournament first) and the join row is inserted. Any error
        rolls the whole operation back.
        """
        with self._engine.begin() as conn:
            tournament = self._tournaments.get(tournament_id, conn=conn, for_update=True)
            if tournament is None:
                logger.warning("Enrollment rejected: tournament %s not found", tournament_id)
                raise NotFoundError("Tournament", tournament_id)
            if self._members.get(member_id, conn=conn) is None:
                logger.warning("Enrollment rejected: member %s not found", member_id)
                raise NotFoundError("Member", member_id)

            added = self._tournaments.add_member(conn, tournament_id, member_id)
            updated = self._tournaments.get(tournament_id, conn=conn)

        outcome = "enrolled" if added else "already_enrolled"
        ENROLLMENTS.labels(outcome=outcome).inc()
        logger.info("Enrollment %s tournament=%s member=%s", outcome, tournament_id, member_id)
        return updated

    def members_of(self, tournament_id: str) -> Tuple[Member, ...]:
        """Snapshot of the members entered in a tournament."""
        with self._engine.connect() as conn:
            if self._tournaments.get(tournament_id, conn=conn) is None:
                raise NotFoundError("Tournament", tournament_id)
            return tuple(self._members.find_enrolled_in(tournament_id, conn=conn))
