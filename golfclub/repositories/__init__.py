# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: re-exports the member and tournament stores."""
from golfclub.repositories.member_repository import MemberRepository
from golfclub.repositories.tournament_repository import TournamentRepository

__all__ = ["MemberRepository", "TournamentRepository"]
