from .GoogleProvider import GoogleProvider
from .OpenAIProvider import OpenAIProvider
