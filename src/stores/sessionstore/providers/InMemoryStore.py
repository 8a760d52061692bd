from ..SessionStoreInterface import SessionStoreInterface
from typing import Any, Optional
import copy

class InMemoryStore(SessionStoreInterface):

    def __init__(self):
        self.data = {}

    def load(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self.data.get(key))

    def save(self, key: str, value: Any):
        self.data[key] = copy.deepcopy(value)

    def delete(self, key: str):
        self.data.pop(key, None)
