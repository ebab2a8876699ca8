"""Shared fixtures: an in-memory SQLite store with the schema created per test."""
import pytest
from sqlalchemy.pool import StaticPool

from golfclub.core.database import build_engine
from golfclub.models.tables import create_schema
from golfclub.repositories import MemberRepository, TournamentRepository
from golfclub.services.enrollment_service import EnrollmentService
from golfclub.services.member_service import MemberService
from golfclub.services.tournament_service import TournamentService


@pytest.fixture
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def member_repo(engine):
    return MemberRepository(engine)


@pytest.fixture
def tournament_repo(engine):
    return TournamentRepository(engine)


@pytest.fixture
def member_service(member_repo):
    return MemberService(member_repo)


@pytest.fixture
def tournament_service(tournament_repo):
    return TournamentService(tournament_repo)


@pytest.fixture
def enrollment_service(engine, member_repo, tournament_repo):
    return EnrollmentService(engine, member_repo, tournament_repo)
