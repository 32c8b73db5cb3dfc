from typing import Optional
from supabase import create_client, Client
from mentorship_bridge.core.config import Settings, settings as default_settings
import logging

logger = logging.getLogger(__name__)


class SupabaseConnection:
    """Lazily-built, memoized Supabase client handle.

    The client is created on first use from the configured URL and anon key and
    kept for the lifetime of the handle. Missing credentials are not cached as a
    failure: every call retries until a client can be built.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[Client] = None):
        self.settings = settings or default_settings
        self._client = client

    @property
    def is_ready(self) -> bool:
        return self._client is not None

    def get_client(self) -> Optional[Client]:
        """Return the memoized client, building it on first use."""
        if self._client is not None:
            return self._client
        if not self.settings.has_supabase_credentials:
            logger.warning("Missing SUPABASE_URL or SUPABASE_ANON_KEY")
            return None
        try:
            self._client = create_client(self.settings.supabase_url, self.settings.supabase_anon_key)
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}")
            raise
        logger.info("Supabase client ready")
        return self._client

    def reset(self) -> None:
        """Drop the memoized client; the next call rebuilds it."""
        self._client = None


# Process-wide default handle
connection = SupabaseConnection()

