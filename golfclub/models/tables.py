# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Relational schema: members, tournaments and the tournament_members join.

The join table is the only stored form of the member/tournament association;
both directions are read from it.
"""
from sqlalchemy import (
    Column, Date, DateTime, ForeignKey, Integer, MetaData, Numeric, String,
    Table, func,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

members = Table(
    "members",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("member_name", String(255), nullable=False),
    Column("address", String(500)),
    Column("email", String(255), nullable=False, unique=True),
    Column("phone_number", String(50), index=True),
    Column("membership_start_date", Date),
    Column("membership_duration_months", Integer),
    Column("membership_type", String(100)),
    Column("created_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
)

tournaments = Table(
    "tournaments",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("start_date", Date, index=True),
    Column("end_date", Date),
    Column("location", String(255)),
    Column("entry_fee", Numeric(12, 2, asdecimal=True)),
    Column("cash_prize_amount", Numeric(12, 2, asdecimal=True)),
    Column("created_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
)

tournament_members = Table(
    "tournament_members",
    metadata,
    Column("tournament_id", String(36), ForeignKey("tournaments.id"), primary_key=True),
    Column("member_id", String(36), ForeignKey("members.id"), primary_key=True, index=True),
    Column("enrolled_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
)


def create_schema(engine: Engine) -> None:
    metadata.create_all(engine)
