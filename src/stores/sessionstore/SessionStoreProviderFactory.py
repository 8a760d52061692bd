from .SessionStoreEnums import SessionStoreEnums
from .providers import JSONFileStore, InMemoryStore

class SessionStoreProviderFactory:
    def __init__(self, config):
        self.config = config

    def create(self, provider: str):
        if provider == SessionStoreEnums.JSON_FILE.value:
            return JSONFileStore(file_path=self.config.SESSION_STORE_PATH)

        if provider == SessionStoreEnums.MEMORY.value:
            return InMemoryStore()

        return None
