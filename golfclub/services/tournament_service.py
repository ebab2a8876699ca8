# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Tournament creation, lookup and search."""
from datetime import date
from typing import Any, Dict, List

from golfclub.core.errors import NotFoundError
from golfclub.core.logging import get_logger
from golfclub.metrics import TOURNAMENTS_CREATED
from golfclub.models.domain import Tournament
from golfclub.repositories.tournament_repository import TournamentRepository
from golfclub.services.member_service import require_fields

logger = get_logger(__name__)

REQUIRED_TOURNAMENT_FIELDS = ("start_date", "location")


class TournamentService:
    def __init__(self, repo: TournamentRepository):
        self._repo = repo

    def create_tournament(self, data: Dict[str, Any]) -> Tournament:
        require_fields(data, REQUIRED_TOURNAMENT_FIELDS)
        tournament = self._repo.create(data)
        TOURNAMENTS_CREATED.inc()
        logger.info("Tournament created id=%s start=%s location=%s",
                    tournament.id, tournament.start_date, tournament.location)
        return tournament

    def get_tournament(self, tournament_id: str) -> Tournament:
        tournament = self._repo.get(tournament_id)
        if tournament is None:
            raise NotFoundError("Tournament", tournament_id)
        return tournament

    def list_tournaments(self) -> List[Tournament]:
        return self._repo.list_all()

    def search_by_start_date(self, start_date: date) -> List[Tournament]:
        return self._repo.find_by_start_date(start_date)

    def search_by_location(self, location: str) -> List[Tournament]:
        return self._repo.find_by_location_contains(location)
