from pydantic_settings import BaseSettings
from typing import List
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "PRIISME Style AI"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")

    # Security
    SECRET_KEY: str = os.getenv("SECRET_KEY", "")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Database
    MONGODB_URL: str = os.getenv("MONGODB_URL", "mongodb://localhost:27017/priisme")
    DATABASE_NAME: str = os.getenv("DATABASE_NAME", "priisme")

    # AI gateway (OpenAI-compatible chat completions)
    AI_GATEWAY_URL: str = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1")
    AI_GATEWAY_API_KEY: str = os.getenv("AI_GATEWAY_API_KEY", "")
    # Legacy name for the gateway key
    LOVABLE_API_KEY: str = os.getenv("LOVABLE_API_KEY", "")
    STYLE_ANALYSIS_MODEL: str = os.getenv("STYLE_ANALYSIS_MODEL", "google/gemini-2.5-flash")

    # CORS
    CORS_ALLOW_HEADERS: List[str] = ["authorization", "x-client-info", "apikey", "content-type"]

    # Style history shown on the analysis page
    STYLE_HISTORY_LIMIT: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Allow extra fields from .env file

    @property
    def style_api_key(self) -> str:
        return self.AI_GATEWAY_API_KEY or self.LOVABLE_API_KEY

settings = Settings()

def validate_server_settings(settings: Settings) -> None:
    """Validate critical settings for production; the API calls this at import"""
    if settings.DEBUG:
        return
    if not settings.SECRET_KEY:
        raise ValueError("SECRET_KEY must be set in production environment")
    if len(settings.SECRET_KEY) < 32:
        raise ValueError("SECRET_KEY should be at least 32 characters for security")
