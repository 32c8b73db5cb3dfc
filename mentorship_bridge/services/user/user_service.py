from typing import Optional, Dict, Any, Union
from pydantic import ValidationError
from mentorship_bridge.core.exceptions import InvalidInputError
from mentorship_bridge.models.models import UserUpsert, UserRole
from mentorship_bridge.services.base import SupabaseService
import logging

logger = logging.getLogger(__name__)

USERS_TABLE = "users"


class UserService(SupabaseService):
    async def upsert_user(
        self,
        email: str,
        name: Optional[str] = None,
        role: Optional[Union[UserRole, str]] = None,
    ) -> Dict[str, Any]:
        """Insert or update a user keyed by email. Role defaults to mentee."""
        if not email:
            raise InvalidInputError("email required")
        try:
            payload = UserUpsert(email=email, name=name, role=role)
        except ValidationError as e:
            raise InvalidInputError(f"role must be mentee|mentor, got {role!r}") from e

        try:
            row = self._execute_single(
                self.supabase.table(USERS_TABLE).upsert(payload.to_row())
            )
            logger.info(f"Upserted user {email} as {payload.role.value}")
            return row
        except Exception as e:
            logger.error(f"Error upserting user {email}: {e}")
            raise

    async def ping(self) -> None:
        """Cheapest possible read against the users table"""
        self._execute(self.supabase.table(USERS_TABLE).select("email").limit(1))
