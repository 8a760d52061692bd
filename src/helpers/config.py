from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    # API and model configuration
    APP_NAME: str = "HealthAssist AI"
    APP_VERSION: str = "0.1.0"
    FASTAPI_URL: str = "http://localhost:5000"  # Default to localhost if not specified

    GOOGLE_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_API_URL: Optional[str] = None

    GENERATION_BACKEND_LITERAL: List[str] = ["GOOGLE", "OPENAI"]
    GENERATION_BACKEND: str = "GOOGLE"
    GENERATION_MODEL_ID: str = "gemini-2.0-flash"
    INPUT_DAFAULT_MAX_CHARACTERS: int = 4000
    GENERATION_DAFAULT_MAX_TOKENS: int = 2048
    GENERATION_DAFAULT_TEMPERATURE: float = 0.2

    PRIMARY_LANG: str = "en"
    DEFAULT_LANG: str = "en"

    # Client-local persistence (chat history, mock user)
    SESSION_STORE_BACKEND: str = "JSON_FILE"
    SESSION_STORE_PATH: str = ".healthassist_store.json"

    # Fallback when geolocation is denied (Melbourne CBD)
    DEFAULT_LOCATION_LAT: float = -37.8136
    DEFAULT_LOCATION_LNG: float = 144.9631

    model_config = SettingsConfigDict(env_file=".env", extra="allow")

def get_settings():
    return Settings()
