"""
Mentor profile service
"""
import logging
from typing import Optional, List, Dict, Any

from pydantic import ValidationError

from mentorship_bridge.core.database import SupabaseConnection
from mentorship_bridge.core.exceptions import InvalidInputError
from mentorship_bridge.models.models import MentorProfileUpsert, UserRole
from mentorship_bridge.services.base import SupabaseService
from mentorship_bridge.services.user.user_service import UserService

logger = logging.getLogger(__name__)

MENTORS_TABLE = "mentors"


class MentorService(SupabaseService):
    def __init__(self, connection: SupabaseConnection, user_service: UserService):
        super().__init__(connection)
        self.user_service = user_service

    async def upsert_mentor_profile(
        self,
        user_email: str,
        timezone: Optional[str] = None,
        availability: Optional[List[str]] = None,
        types: Optional[List[str]] = None,
        skills: Optional[List[str]] = None,
        topics: Optional[List[str]] = None,
        bio: Optional[str] = None,
        meeting_link: Optional[str] = None,
        linkedin: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Upsert the mentor's user row (role=mentor), then the profile keyed on user_email.

        Not transactional: if the profile write fails the user row stays.
        """
        if not user_email:
            raise InvalidInputError("user_email required")
        try:
            payload = MentorProfileUpsert(
                user_email=user_email,
                timezone=timezone,
                availability=availability,
                types=types,
                skills=skills,
                topics=topics,
                bio=bio,
                meeting_link=meeting_link,
                linkedin=linkedin,
            )
        except ValidationError as e:
            raise InvalidInputError(f"Invalid mentor profile for {user_email}: {e}") from e

        await self.user_service.upsert_user(email=user_email, role=UserRole.MENTOR)
        try:
            row = self._execute_single(
                self.supabase.table(MENTORS_TABLE).upsert(payload.to_row(), on_conflict="user_email")
            )
            logger.info(f"Upserted mentor profile for {user_email}")
            return row
        except Exception as e:
            logger.error(f"Error upserting mentor profile for {user_email}: {e}")
            raise
