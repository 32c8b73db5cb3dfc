"""
Mentorship request service: creation, mentor inbox, status changes and accepted pairs
"""
import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any, Union

from pydantic import ValidationError

from mentorship_bridge.core.database import SupabaseConnection
from mentorship_bridge.core.exceptions import InvalidInputError
from mentorship_bridge.models.models import RequestCreate, RequestStatus, Perspective, UserRole
from mentorship_bridge.services.base import SupabaseService
from mentorship_bridge.services.user.user_service import UserService

logger = logging.getLogger(__name__)

REQUESTS_TABLE = "requests"
REQUESTS_WITH_NAMES_VIEW = "v_requests_with_names"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class RequestService(SupabaseService):
    def __init__(self, connection: SupabaseConnection, user_service: UserService):
        super().__init__(connection)
        self.user_service = user_service

    async def create_request(
        self,
        mentee_email: str,
        mentor_email: str,
        note: Optional[str] = None,
        interests: Optional[Union[str, List[str]]] = None,
    ) -> Dict[str, Any]:
        """Create a pending request after making sure both users exist.

        The two user upserts and the insert are independent calls; a failed
        insert leaves both user rows in place.
        """
        if not mentee_email or not mentor_email:
            raise InvalidInputError("mentee_email and mentor_email required")
        try:
            payload = RequestCreate(
                mentee_email=mentee_email,
                mentor_email=mentor_email,
                note=note,
                interests=interests,
            )
        except ValidationError as e:
            raise InvalidInputError(f"Invalid request from {mentee_email}: {e}") from e

        await self.user_service.upsert_user(email=mentee_email, role=UserRole.MENTEE)
        await self.user_service.upsert_user(email=mentor_email, role=UserRole.MENTOR)
        try:
            row = self._execute_single(
                self.supabase.table(REQUESTS_TABLE).insert(payload.to_row())
            )
            logger.info(f"Created request {row.get('id')} from {mentee_email} to {mentor_email}")
            return row
        except Exception as e:
            logger.error(f"Error creating request from {mentee_email} to {mentor_email}: {e}")
            raise

    async def fetch_mentor_inbox(self, mentor_email: str) -> List[Dict[str, Any]]:
        """All requests addressed to a mentor, newest first"""
        if not mentor_email:
            raise InvalidInputError("mentor_email required")
        try:
            return self._execute(
                self.supabase.table(REQUESTS_WITH_NAMES_VIEW)
                .select("*")
                .eq("mentor_email", mentor_email)
                .order("created_at", desc=True)
            )
        except Exception as e:
            logger.error(f"Error fetching inbox for mentor {mentor_email}: {e}")
            raise

    async def update_request_status(
        self,
        request_id: Union[int, str],
        status: Union[RequestStatus, str],
    ) -> Dict[str, Any]:
        """Set a request's status and stamp decided_at with the current UTC time.

        Any status may move to any other; only membership in RequestStatus is checked.
        """
        if not request_id:
            raise InvalidInputError("id required")
        try:
            status = RequestStatus(status)
        except ValueError:
            raise InvalidInputError("status must be pending|accepted|declined")

        try:
            row = self._execute_single(
                self.supabase.table(REQUESTS_TABLE)
                .update({"status": status.value, "decided_at": _utc_now_iso()})
                .eq("id", request_id)
            )
            logger.info(f"Request {request_id} status updated to {status.value}")
            return row
        except Exception as e:
            logger.error(f"Error updating status of request {request_id}: {e}")
            raise

    async def list_active_pairs(
        self,
        email: str,
        perspective: Optional[Union[Perspective, str]] = None,
    ) -> List[Dict[str, Any]]:
        """Accepted requests involving ``email`` on the given side.

        Without a perspective every accepted request is returned.
        """
        if not email:
            raise InvalidInputError("email required")
        if perspective:
            try:
                perspective = Perspective(perspective)
            except ValueError:
                raise InvalidInputError("perspective must be mentee|mentor")

        try:
            query = (
                self.supabase.table(REQUESTS_WITH_NAMES_VIEW)
                .select("*")
                .eq("status", RequestStatus.ACCEPTED.value)
            )
            if perspective == Perspective.MENTEE:
                query = query.eq("mentee_email", email)
            elif perspective == Perspective.MENTOR:
                query = query.eq("mentor_email", email)
            return self._execute(query)
        except Exception as e:
            logger.error(f"Error listing active pairs for {email}: {e}")
            raise

    async def fetch_requests(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """Every request, newest first, optionally narrowed to one status"""
        try:
            query = (
                self.supabase.table(REQUESTS_WITH_NAMES_VIEW)
                .select("*")
                .order("created_at", desc=True)
            )
            if status:
                query = query.eq("status", status.value if isinstance(status, RequestStatus) else status)
            return self._execute(query)
        except Exception as e:
            logger.error(f"Error fetching requests (status={status}): {e}")
            raise
