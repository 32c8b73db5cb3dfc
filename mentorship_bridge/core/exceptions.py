"""
Exceptions raised by the mentorship bridge
"""
from typing import Any, Dict, Optional


class BridgeError(Exception):
    """Base class for every bridge failure"""


class InvalidInputError(BridgeError, ValueError):
    """A required field is missing or a value is outside its enum. Raised before any remote call."""


class BridgeNotConfiguredError(BridgeError):
    """No Supabase client could be built (URL or anon key missing)"""


class RemoteError(BridgeError):
    """The Supabase client reported a failure.

    ``detail`` holds the error payload exactly as the client returned it
    (message, code, hint, details). The original exception is chained.
    """

    def __init__(self, detail: Optional[Dict[str, Any]] = None, message: Optional[str] = None):
        self.detail = detail or {}
        self.message = message or self.detail.get("message") or "Remote call failed"
        super().__init__(self.message)

    @property
    def code(self) -> Optional[str]:
        return self.detail.get("code")

    @classmethod
    def from_api_error(cls, error: Exception) -> "RemoteError":
        detail = {
            "message": getattr(error, "message", None) or str(error),
            "code": getattr(error, "code", None),
            "hint": getattr(error, "hint", None),
            "details": getattr(error, "details", None),
        }
        return cls(detail)
