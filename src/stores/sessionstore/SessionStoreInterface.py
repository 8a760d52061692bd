from abc import ABC, abstractmethod
from typing import Any, Optional

class SessionStoreInterface(ABC):
    """Key/value store for JSON-compatible blobs kept on the client side."""

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        pass

    @abstractmethod
    def save(self, key: str, value: Any):
        pass

    @abstractmethod
    def delete(self, key: str):
        pass
