from .JSONFileStore import JSONFileStore
from .InMemoryStore import InMemoryStore
