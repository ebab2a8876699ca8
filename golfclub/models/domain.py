# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class Member(BaseModel):
    """A golf club member as stored, with the tournaments they are entered in."""
    id: str
    member_name: str
    address: Optional[str] = None
    email: str
    phone_number: Optional[str] = None
    membership_start_date: Optional[date] = None
    membership_duration_months: Optional[int] = None
    membership_type: Optional[str] = None
    # Derived from tournament_members on every read, never written directly.
    tournament_ids: List[str] = Field(default_factory=list)


class Tournament(BaseModel):
    """A tournament as stored, with its enrolled member ids."""
    id: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    location: Optional[str] = None
    entry_fee: Optional[Decimal] = None
    cash_prize_amount: Optional[Decimal] = None
    member_ids: List[str] = Field(default_factory=list)
