# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Member creation, lookup and search."""
from datetime import date
from typing import Any, Dict, List, Optional

from golfclub.core.errors import NotFoundError, ValidationError
from golfclub.core.logging import get_logger
from golfclub.metrics import MEMBERS_CREATED
from golfclub.models.domain import Member
from golfclub.repositories.member_repository import MemberRepository

logger = get_logger(__name__)

REQUIRED_MEMBER_FIELDS = ("member_name", "email")


def require_fields(data: Dict[str, Any], fields) -> None:
    """Raise ValidationError naming every absent or blank field."""
    missing = [
        f for f in fields
        if data.get(f) is None or (isinstance(data[f], str) and not data[f].strip())
    ]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")


class MemberService:
    def __init__(self, repo: MemberRepository):
        self._repo = repo

    def create_member(self, data: Dict[str, Any]) -> Member:
        require_fields(data, REQUIRED_MEMBER_FIELDS)
        member = self._repo.create(data)
        MEMBERS_CREATED.inc()
        logger.info("Member created id=%s type=%s", member.id, member.membership_type)
        return member

    def get_member(self, member_id: str) -> Member:
        member = self._repo.get(member_id)
        if member is None:
            raise NotFoundError("Member", member_id)
        return member

    def list_members(self) -> List[Member]:
        return self._repo.list_all()

    def search_by_name(self, name: str) -> List[Member]:
        return self._repo.find_by_name_contains(name)

    def search_by_membership_type(self, membership_type: str) -> List[Member]:
        return self._repo.find_by_membership_type(membership_type)

    def search_by_phone_number(self, phone_number: str) -> Optional[Member]:
        return self._repo.find_by_phone_number(phone_number)

    def search_by_tournament_start_date(self, start_date: date) -> List[Member]:
        return self._repo.find_by_enrolled_tournament_start_date(start_date)
