"""
Shared plumbing for the Supabase-backed services
"""
import logging
from typing import Any, Dict, List

from postgrest import APIError
from supabase import Client

from mentorship_bridge.core.database import SupabaseConnection
from mentorship_bridge.core.exceptions import BridgeNotConfiguredError, RemoteError

logger = logging.getLogger(__name__)

# PostgREST code for "JSON object requested, multiple (or no) rows returned"
SINGLE_ROW_ERROR_CODE = "PGRST116"


class SupabaseService:
    def __init__(self, connection: SupabaseConnection):
        self.connection = connection

    @property
    def supabase(self) -> Client:
        client = self.connection.get_client()
        if client is None:
            raise BridgeNotConfiguredError("Supabase client is not configured; set SUPABASE_URL and SUPABASE_ANON_KEY")
        return client

    def _execute(self, query) -> List[Dict[str, Any]]:
        """Run a query builder and return its rows, surfacing client errors as RemoteError"""
        try:
            result = query.execute()
        except APIError as e:
            raise RemoteError.from_api_error(e) from e
        return result.data or []

    def _execute_single(self, query) -> Dict[str, Any]:
        """Run a write that must come back with exactly one row"""
        rows = self._execute(query)
        if len(rows) != 1:
            raise RemoteError({
                "message": f"Expected a single row, got {len(rows)}",
                "code": SINGLE_ROW_ERROR_CODE,
                "hint": None,
                "details": None,
            })
        return rows[0]
