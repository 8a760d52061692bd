from .map_marker import MapMarker, MarkerType
from .chat_session import ChatMessage, ChatSession, MessageRole
from .mock_user import MockUser
from .session_state import SessionState
