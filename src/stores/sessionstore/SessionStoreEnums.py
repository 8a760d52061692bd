from enum import Enum

class SessionStoreEnums(Enum):
    JSON_FILE = "JSON_FILE"
    MEMORY = "MEMORY"

class SessionStoreKeys(Enum):
    CHAT_SESSIONS = "healthassist-chat-sessions"
    MOCK_USER = "healthassist-mock-user"
