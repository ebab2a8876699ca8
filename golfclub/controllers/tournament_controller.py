# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: tournament creation, lookup, search and enrollment."""
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query

from golfclub.core.dependencies import get_enrollment_service, get_tournament_service
from golfclub.schemas import MemberOut, TournamentCreate, TournamentOut
from golfclub.services.enrollment_service import EnrollmentService
from golfclub.services.tournament_service import TournamentService

router = APIRouter(prefix="/api/v1", tags=["Tournaments"])


@router.post("/tournaments", status_code=201, response_model=TournamentOut)
def create_tournament(body: TournamentCreate,
                      service: TournamentService = Depends(get_tournament_service)):
    tournament = service.create_tournament(body.model_dump())
    return TournamentOut(**tournament.model_dump())


@router.get("/tournaments", response_model=List[TournamentOut])
def list_tournaments(service: TournamentService = Depends(get_tournament_service)):
    return [TournamentOut(**t.model_dump()) for t in service.list_tournaments()]


@router.get("/tournaments/search/by-start-date", response_model=List[TournamentOut])
def search_by_start_date(start_date: date = Query(..., alias="startDate"),
                         service: TournamentService = Depends(get_tournament_service)):
    return [TournamentOut(**t.model_dump()) for t in service.search_by_start_date(start_date)]


@router.get("/tournaments/search/by-location", response_model=List[TournamentOut])
def search_by_location(location: str = Query(..., min_length=1),
                       service: TournamentService = Depends(get_tournament_service)):
    return [TournamentOut(**t.model_dump()) for t in service.search_by_location(location)]


@router.get("/tournaments/{tournament_id}", response_model=TournamentOut)
def get_tournament(tournament_id: str,
                   service: TournamentService = Depends(get_tournament_service)):
    return TournamentOut(**service.get_tournament(tournament_id).model_dump())


@router.post("/tournaments/{tournament_id}/members/{member_id}", response_model=TournamentOut)
def enroll_member(tournament_id: str, member_id: str,
                  service: EnrollmentService = Depends(get_enrollment_service)):
    return TournamentOut(**service.enroll(tournament_id, member_id).model_dump())


@router.get("/tournaments/{tournament_id}/members", response_model=List[MemberOut])
def list_tournament_members(tournament_id: str,
                            service: EnrollmentService = Depends(get_enrollment_service)):
    return [MemberOut(**m.model_dump()) for m in service.members_of(tournament_id)]
