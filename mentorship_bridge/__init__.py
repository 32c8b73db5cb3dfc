"""
Mentorship bridge: async helpers over the Supabase tables of the mentorship app
"""

from .bridge import MentorshipBridge, supa
from .core.database import SupabaseConnection
from .core.exceptions import BridgeError, BridgeNotConfiguredError, InvalidInputError, RemoteError

__all__ = [
    'MentorshipBridge',
    'supa',
    'SupabaseConnection',
    'BridgeError',
    'BridgeNotConfiguredError',
    'InvalidInputError',
    'RemoteError',
]
