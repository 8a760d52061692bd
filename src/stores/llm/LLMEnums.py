from enum import Enum

class LLMEnums(Enum):
    OPENAI = "OPENAI"
    GOOGLE = "GOOGLE"

class GoogleEnums(Enum):
    USER = "user"

    # Gemini structured output
    JSON_MIME_TYPE = "application/json"

class OpenAIEnums(Enum):
    USER = "user"

# Same policy for every flow: medical content is allowed through, abuse is not.
GOOGLE_SAFETY_SETTINGS = {
    "HARM_CATEGORY_DANGEROUS_CONTENT": "BLOCK_NONE",
    "HARM_CATEGORY_HATE_SPEECH": "BLOCK_MEDIUM_AND_ABOVE",
    "HARM_CATEGORY_HARASSMENT": "BLOCK_MEDIUM_AND_ABOVE",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT": "BLOCK_MEDIUM_AND_ABOVE",
}
