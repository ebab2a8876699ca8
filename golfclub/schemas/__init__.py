# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ── Member Schemas ──

class MemberCreate(BaseModel):
    member_name: str = Field(..., min_length=1, max_length=255, examples=["Samantha Lee"])
    address: Optional[str] = Field(default=None, max_length=500)
    email: str = Field(..., min_length=1, max_length=255, examples=["sam@example.com"])
    phone_number: Optional[str] = Field(default=None, max_length=50, examples=["555-0101"])
    membership_start_date: Optional[date] = None
    membership_duration_months: Optional[int] = Field(default=None, ge=0)
    membership_type: Optional[str] = Field(default=None, max_length=100, examples=["premium"])

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.strip()


class MemberOut(BaseModel):
    id: str
    member_name: str
    address: Optional[str] = None
    email: str
    phone_number: Optional[str] = None
    membership_start_date: Optional[date] = None
    membership_duration_months: Optional[int] = None
    membership_type: Optional[str] = None
    tournament_ids: List[str] = []


# ── Tournament Schemas ──

class TournamentCreate(BaseModel):
    start_date: date = Field(..., examples=["2024-06-01"])
    end_date: Optional[date] = Field(default=None, examples=["2024-06-03"])
    location: str = Field(..., min_length=1, max_length=255, examples=["Pebble Beach"])
    entry_fee: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2, examples=["150.00"])
    cash_prize_amount: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2, examples=["10000.00"])


class TournamentOut(BaseModel):
    id: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    location: Optional[str] = None
    entry_fee: Optional[Decimal] = None
    cash_prize_amount: Optional[Decimal] = None
    member_ids: List[str] = []


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
