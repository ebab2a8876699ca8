# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: member creation, lookup and search."""
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from golfclub.core.dependencies import get_member_service
from golfclub.schemas import MemberCreate, MemberOut
from golfclub.services.member_service import MemberService

router = APIRouter(prefix="/api/v1", tags=["Members"])


@router.post("/members", status_code=201, response_model=MemberOut)
def create_member(body: MemberCreate,
                  service: MemberService = Depends(get_member_service)):
    member = service.create_member(body.model_dump())
    return MemberOut(**member.model_dump())


@router.get("/members", response_model=List[MemberOut])
def list_members(service: MemberService = Depends(get_member_service)):
    return [MemberOut(**m.model_dump()) for m in service.list_members()]


@router.get("/members/search/by-name", response_model=List[MemberOut])
def search_by_name(name: str = Query(..., min_length=1),
                   service: MemberService = Depends(get_member_service)):
    return [MemberOut(**m.model_dump()) for m in service.search_by_name(name)]


@router.get("/members/search/by-membership-type", response_model=List[MemberOut])
def search_by_membership_type(
    membership_type: str = Query(..., alias="membershipType", min_length=1),
    service: MemberService = Depends(get_member_service),
):
    return [MemberOut(**m.model_dump()) for m in service.search_by_membership_type(membership_type)]


@router.get("/members/search/by-phone", response_model=MemberOut)
def search_by_phone(phone_number: str = Query(..., alias="phoneNumber", min_length=1),
                    service: MemberService = Depends(get_member_service)):
    member = service.search_by_phone_number(phone_number)
    if member is None:
        raise HTTPException(status_code=404, detail="Member not found for phone")
    return MemberOut(**member.model_dump())


@router.get("/members/search/by-tournament-start-date", response_model=List[MemberOut])
def search_by_tournament_start_date(
    start_date: date = Query(..., alias="startDate"),
    service: MemberService = Depends(get_member_service),
):
    return [MemberOut(**m.model_dump()) for m in service.search_by_tournament_start_date(start_date)]


@router.get("/members/{member_id}", response_model=MemberOut)
def get_member(member_id: str, service: MemberService = Depends(get_member_service)):
    return MemberOut(**service.get_member(member_id).model_dump())
