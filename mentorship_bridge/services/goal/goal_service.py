"""
Goal Service for mentee goals
"""
import logging
from typing import Optional, Dict, Any, Union

from pydantic import ValidationError

from mentorship_bridge.core.database import SupabaseConnection
from mentorship_bridge.core.exceptions import InvalidInputError
from mentorship_bridge.models.models import GoalCreate, UserRole
from mentorship_bridge.services.base import SupabaseService
from mentorship_bridge.services.user.user_service import UserService

logger = logging.getLogger(__name__)

GOALS_TABLE = "goals"


class GoalService(SupabaseService):
    def __init__(self, connection: SupabaseConnection, user_service: UserService):
        super().__init__(connection)
        self.user_service = user_service

    async def create_goal(
        self,
        mentee_email: str,
        title: str,
        mentor_email: Optional[str] = None,
        notes: Optional[str] = None,
        status: Optional[str] = None,
        progress: Optional[Union[int, float]] = None,
        start_date: Optional[str] = None,
        due_date: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Insert a goal for a mentee (status "open", progress 0 unless given).

        The mentee, and the mentor when one is named, are upserted first.
        """
        if not mentee_email or not title:
            raise InvalidInputError("mentee_email and title required")
        try:
            payload = GoalCreate(
                mentee_email=mentee_email,
                title=title,
                mentor_email=mentor_email,
                notes=notes,
                status=status,
                progress=progress,
                start_date=start_date,
                due_date=due_date,
            )
        except ValidationError as e:
            raise InvalidInputError(f"Invalid goal for {mentee_email}: {e}") from e

        await self.user_service.upsert_user(email=mentee_email, role=UserRole.MENTEE)
        if payload.mentor_email:
            await self.user_service.upsert_user(email=payload.mentor_email, role=UserRole.MENTOR)
        try:
            row = self._execute_single(
                self.supabase.table(GOALS_TABLE).insert(payload.to_row())
            )
            logger.info(f"Created goal {row.get('id')} for {mentee_email}")
            return row
        except Exception as e:
            logger.error(f"Error creating goal for {mentee_email}: {e}")
            raise
