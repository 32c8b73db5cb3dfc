"""
Admin Service: read-only listings for the admin dashboard
"""

import logging
from typing import Optional, List, Dict, Any

from mentorship_bridge.core.database import SupabaseConnection
from mentorship_bridge.core.exceptions import RemoteError
from mentorship_bridge.models.models import MentorJoinedRecord, MenteeSummary, UserRole
from mentorship_bridge.services.base import SupabaseService
from mentorship_bridge.services.mentor.mentor_service import MENTORS_TABLE
from mentorship_bridge.services.request.request_service import RequestService
from mentorship_bridge.services.user.user_service import USERS_TABLE

logger = logging.getLogger(__name__)

LIST_SEPARATOR = "|"


def _join_list(value) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return LIST_SEPARATOR.join(str(item) for item in value)


class AdminService(SupabaseService):
    def __init__(self, connection: SupabaseConnection, request_service: RequestService):
        super().__init__(connection)
        self.request_service = request_service

    async def fetch_requests(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """All requests with names, newest first, optionally filtered by status"""
        return await self.request_service.fetch_requests(status)

    async def fetch_mentors_joined(self) -> List[MentorJoinedRecord]:
        """Every mentor user joined in memory with their profile (if any)"""
        users_error: Optional[RemoteError] = None
        mentors_error: Optional[RemoteError] = None
        users: List[Dict[str, Any]] = []
        mentors: List[Dict[str, Any]] = []

        # Both reads are issued before either error is raised; the users error wins
        try:
            users = self._execute(
                self.supabase.table(USERS_TABLE).select("*").eq("role", UserRole.MENTOR.value)
            )
        except RemoteError as e:
            users_error = e
        try:
            mentors = self._execute(self.supabase.table(MENTORS_TABLE).select("*"))
        except RemoteError as e:
            mentors_error = e

        for error in (users_error, mentors_error):
            if error is not None:
                logger.error(f"Error fetching mentors for admin listing: {error}")
                raise error

        profiles_by_email = {m.get("user_email"): m for m in mentors}
        records = []
        for user in users:
            profile = profiles_by_email.get(user.get("email")) or {}
            records.append(MentorJoinedRecord(
                user_email=user.get("email"),
                name=user.get("name") or "",
                timezone=profile.get("timezone") or "",
                availability=_join_list(profile.get("availability")),
                types=_join_list(profile.get("types")),
                skills=_join_list(profile.get("skills")),
                topics=_join_list(profile.get("topics")),
                linkedin=profile.get("linkedin") or "",
                meeting_link=profile.get("meeting_link") or "",
                created_at=profile.get("created_at") or "",
            ))
        return records

    async def fetch_mentees(self) -> List[MenteeSummary]:
        """Mentee users, newest first, projected to email/name/created_at"""
        try:
            users = self._execute(
                self.supabase.table(USERS_TABLE)
                .select("*")
                .eq("role", UserRole.MENTEE.value)
                .order("created_at", desc=True)
            )
        except Exception as e:
            logger.error(f"Error fetching mentees for admin listing: {e}")
            raise
        return [
            MenteeSummary(email=u.get("email"), name=u.get("name") or "", created_at=u.get("created_at"))
            for u in users
        ]
