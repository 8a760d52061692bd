from .BaseService import BaseService
from stores.sessionstore.SessionStoreInterface import SessionStoreInterface
from stores.sessionstore.SessionStoreEnums import SessionStoreKeys
from models.db_schemes import SessionState, ChatSession, ChatMessage, MessageRole
from pydantic import ValidationError
from typing import List, Optional, Tuple
from datetime import tzinfo
import logging

logger = logging.getLogger('uvicorn.error')

SESSION_TITLE_MAX_CHARACTERS = 35

class SessionService(BaseService):
    """
    Client-local chat history.

    `load`, `save` and `clear` talk to the store. Everything else is a pure
    function of a `SessionState`: it returns a new state and leaves the one
    passed in untouched, so the caller decides when to persist.
    """

    def __init__(self, session_store: SessionStoreInterface):
        super().__init__()
        self.session_store = session_store

    def load(self) -> SessionState:
        raw_state = self.session_store.load(SessionStoreKeys.CHAT_SESSIONS.value)
        if raw_state is None:
            return SessionState()

        try:
            return SessionState.model_validate(raw_state)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable chat history: {e.error_count()} validation error(s)")
            return SessionState()

    def save(self, state: SessionState):
        self.session_store.save(
            SessionStoreKeys.CHAT_SESSIONS.value,
            state.model_dump(mode="json", by_alias=True),
        )

    def clear(self) -> SessionState:
        self.session_store.delete(SessionStoreKeys.CHAT_SESSIONS.value)
        return SessionState()

    @staticmethod
    def start_session(state: SessionState, symptoms: str, image_data_uri: Optional[str] = None,
                      title: Optional[str] = None) -> Tuple[SessionState, ChatSession]:
        session = ChatSession(
            current_symptoms=symptoms,
            image_data_uri=image_data_uri,
            title=title,
            messages=[ChatMessage(role=MessageRole.USER, text=symptoms)],
        )
        new_state = state.model_copy(update={
            "sessions": [session] + list(state.sessions),
            "active_session_id": session.id,
        })
        return new_state, session

    @staticmethod
    def get_session(state: SessionState, session_id: str) -> Optional[ChatSession]:
        for session in state.sessions:
            if session.id == session_id:
                return session
        return None

    @staticmethod
    def update_session(state: SessionState, session_id: str, **changes) -> SessionState:
        """Replace fields of one session. Raises KeyError for an unknown id."""
        if SessionService.get_session(state, session_id) is None:
            raise KeyError(f"No chat session with id '{session_id}'")

        sessions = [
            session.model_copy(update=changes) if session.id == session_id else session
            for session in state.sessions
        ]
        return state.model_copy(update={"sessions": sessions})

    @staticmethod
    def add_message(state: SessionState, session_id: str, role: MessageRole, text: str) -> SessionState:
        session = SessionService.get_session(state, session_id)
        if session is None:
            raise KeyError(f"No chat session with id '{session_id}'")

        return SessionService.update_session(
            state, session_id,
            messages=list(session.messages) + [ChatMessage(role=role, text=text)],
        )

    @staticmethod
    def delete_session(state: SessionState, session_id: str) -> SessionState:
        sessions = [session for session in state.sessions if session.id != session_id]
        active_session_id = None if state.active_session_id == session_id else state.active_session_id
        return state.model_copy(update={
            "sessions": sessions,
            "active_session_id": active_session_id,
        })

    @staticmethod
    def sorted_sessions(state: SessionState) -> List[ChatSession]:
        return sorted(state.sessions, key=lambda session: session.timestamp, reverse=True)

    @staticmethod
    def session_title(session: ChatSession, tz: Optional[tzinfo] = None) -> str:
        """Stored timestamps are UTC; the date fallback is shown in `tz` (the local zone by default)."""
        if session.title:
            return session.title

        if session.current_symptoms:
            title = session.current_symptoms[:SESSION_TITLE_MAX_CHARACTERS]
            return title + "..." if len(title) < len(session.current_symptoms) else title

        return f"Chat from {session.timestamp.astimezone(tz).strftime('%d/%m/%Y')}"
