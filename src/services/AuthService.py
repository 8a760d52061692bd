from .BaseService import BaseService
from stores.sessionstore.SessionStoreInterface import SessionStoreInterface
from stores.sessionstore.SessionStoreEnums import SessionStoreKeys
from models.db_schemes import MockUser
from pydantic import ValidationError
from typing import Optional
import uuid
import re
import logging

logger = logging.getLogger('uvicorn.error')

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6


class AuthError(Exception):
    """Rejected credentials. The message is shown to the user as is."""


class AuthService(BaseService):
    """
    Mock authentication: no accounts are checked anywhere. A well-formed
    email and password yield a fabricated user that is kept in the session
    store until logout.
    """

    def __init__(self, session_store: SessionStoreInterface):
        super().__init__()
        self.session_store = session_store

    @staticmethod
    def _validate_email(email: str) -> str:
        email = (email or "").strip().lower()
        if not EMAIL_PATTERN.match(email):
            raise AuthError("Please enter a valid email address.")
        return email

    @staticmethod
    def _fabricate_user(email: str) -> MockUser:
        return MockUser(
            uid=uuid.uuid5(uuid.NAMESPACE_URL, f"mailto:{email}").hex,
            email=email,
            display_name=email.split("@")[0],
        )

    def _sign_in(self, user: MockUser) -> MockUser:
        self.session_store.save(
            SessionStoreKeys.MOCK_USER.value,
            user.model_dump(mode="json", by_alias=True),
        )
        logger.info(f"Signed in mock user {user.email}")
        return user

    def register(self, email: str, password: str) -> MockUser:
        email = self._validate_email(email)
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise AuthError(
                f"The password is too weak. Please choose a stronger password "
                f"(at least {MIN_PASSWORD_LENGTH} characters)."
            )
        return self._sign_in(self._fabricate_user(email))

    def login(self, email: str, password: str) -> MockUser:
        email = self._validate_email(email)
        if not password:
            raise AuthError("Invalid email or password. Please check your credentials and try again.")
        return self._sign_in(self._fabricate_user(email))

    def logout(self):
        self.session_store.delete(SessionStoreKeys.MOCK_USER.value)

    def current_user(self) -> Optional[MockUser]:
        raw_user = self.session_store.load(SessionStoreKeys.MOCK_USER.value)
        if raw_user is None:
            return None

        try:
            return MockUser.model_validate(raw_user)
        except ValidationError:
            logger.warning("Discarding unreadable mock user record")
            self.session_store.delete(SessionStoreKeys.MOCK_USER.value)
            return None
