# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from golfclub.core.database import engine
from golfclub.repositories.member_repository import MemberRepository
from golfclub.repositories.tournament_repository import TournamentRepository
from golfclub.services.enrollment_service import EnrollmentService
from golfclub.services.member_service import MemberService
from golfclub.services.tournament_service import TournamentService

_member_repo = MemberRepository(engine)
_tournament_repo = TournamentRepository(engine)
_member_service = MemberService(_member_repo)
_tournament_service = TournamentService(_tournament_repo)
_enrollment_service = EnrollmentService(engine, _member_repo, _tournament_repo)


def get_tournament_repo() -> TournamentRepository:
    return _tournament_repo


def get_member_service() -> MemberService:
    return _member_service


def get_tournament_service() -> TournamentService:
    return _tournament_service


def get_enrollment_service() -> EnrollmentService:
    return _enrollment_service
