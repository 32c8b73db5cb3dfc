"""
Mentorship bridge: one Supabase client and a small async API over it.

    from mentorship_bridge import supa

    supa.init()
    await supa.create_request("mentee@example.com", "mentor@example.com", note="Hi!")
    inbox = await supa.fetch_mentor_inbox("mentor@example.com")

Configuration comes from SUPABASE_URL / SUPABASE_ANON_KEY (environment or .env).
Tests build a MentorshipBridge over a SupabaseConnection wrapping a fake client.
"""
import logging
from typing import Optional, List, Dict, Any, Union

import httpx
from supabase import Client

from mentorship_bridge.core.database import SupabaseConnection, connection as default_connection
from mentorship_bridge.core.exceptions import BridgeError
from mentorship_bridge.models.models import (
    MentorJoinedRecord,
    MenteeSummary,
    Perspective,
    RequestStatus,
    UserRole,
)
from mentorship_bridge.services.admin.admin_service import AdminService
from mentorship_bridge.services.goal.goal_service import GoalService
from mentorship_bridge.services.mentor.mentor_service import MentorService
from mentorship_bridge.services.request.request_service import RequestService
from mentorship_bridge.services.user.user_service import UserService

logger = logging.getLogger(__name__)


class MentorshipBridge:
    def __init__(self, connection: Optional[SupabaseConnection] = None):
        self.connection = connection or default_connection
        self.users = UserService(self.connection)
        self.mentors = MentorService(self.connection, self.users)
        self.requests = RequestService(self.connection, self.users)
        self.goals = GoalService(self.connection, self.users)
        self.admin = AdminService(self.connection, self.requests)

    def init(self) -> Optional[Client]:
        """Build the client if needed. Returns None (after a warning) when unconfigured."""
        return self.connection.get_client()

    async def check_connection(self) -> bool:
        """Probe the users table; False when unconfigured or unreachable."""
        try:
            await self.users.ping()
            return True
        except (BridgeError, httpx.HTTPError) as e:
            logger.warning(f"Supabase connection check failed: {e}")
            return False

    # ========== USERS ==========
    async def upsert_user(
        self,
        email: str,
        name: Optional[str] = None,
        role: Optional[Union[UserRole, str]] = None,
    ) -> Dict[str, Any]:
        return await self.users.upsert_user(email, name=name, role=role)

    # ========== MENTORS ==========
    async def upsert_mentor_profile(self, user_email: str, **profile: Any) -> Dict[str, Any]:
        return await self.mentors.upsert_mentor_profile(user_email, **profile)

    # ========== REQUESTS ==========
    async def create_request(
        self,
        mentee_email: str,
        mentor_email: str,
        note: Optional[str] = None,
        interests: Optional[Union[str, List[str]]] = None,
    ) -> Dict[str, Any]:
        return await self.requests.create_request(mentee_email, mentor_email, note=note, interests=interests)

    async def fetch_mentor_inbox(self, mentor_email: str) -> List[Dict[str, Any]]:
        return await self.requests.fetch_mentor_inbox(mentor_email)

    async def update_request_status(
        self,
        request_id: Union[int, str],
        status: Union[RequestStatus, str],
    ) -> Dict[str, Any]:
        return await self.requests.update_request_status(request_id, status)

    async def list_active_pairs(
        self,
        email: str,
        perspective: Optional[Union[Perspective, str]] = None,
    ) -> List[Dict[str, Any]]:
        return await self.requests.list_active_pairs(email, perspective)

    # ========== GOALS ==========
    async def create_goal(self, mentee_email: str, title: str, **goal: Any) -> Dict[str, Any]:
        return await self.goals.create_goal(mentee_email, title, **goal)

    # ========== ADMIN HELPERS ==========
    async def admin_fetch_requests(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.admin.fetch_requests(status)

    async def admin_fetch_mentors_joined(self) -> List[MentorJoinedRecord]:
        return await self.admin.fetch_mentors_joined()

    async def admin_fetch_mentees(self) -> List[MenteeSummary]:
        return await self.admin.fetch_mentees()


# Shared namespace for consumers
supa = MentorshipBridge()
