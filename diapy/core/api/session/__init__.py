"""Session state and HTTP session creation."""
from .session_state import SessionState
from .session_factory import SessionFactory

__all__ = [
    'SessionState',
    'SessionFactory',
]
