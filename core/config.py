from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Point to your actual .env file (change path if needed)
load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # OpenAI
    OPENAI_API_KEY: str = ""
    OPENAI_TEXT_MODEL: str = "gpt-4o-mini"
    OPENAI_IMAGE_MODEL: str = "gpt-image-1"
    GENERATE_CAREER_IMAGES: bool = False

    # App
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]
    SIMULATED_OTP: str = "123456"

    # Storage: "memory" for local runs and tests, "firestore" in production
    STORAGE_BACKEND: str = "memory"
    FIRESTORE_KV_COLLECTION: str = "guideai_kv"

    # Occupation reference data
    ISCO_CSV_URL: str = "https://webapps.ilo.org/ilostat-files/Documents/isco.csv"
    ISCO_FETCH_TIMEOUT: float = 20.0
    ISCO_FALLBACK_TO_SAMPLE: bool = True
    ISCO_BOOTSTRAP_ON_STARTUP: bool = True

    # Firebase (service account fields)
    FB_ACCOUNT_TYPE: str | None = None
    FB_PROJECT_ID: str | None = None
    FB_PRIVATE_KEY_ID: str | None = None
    FB_PRIVATE_KEY: str | None = None
    FB_CLIENT_EMAIL: str | None = None
    FB_CLIENT_ID: str | None = None
    FB_AUTH_URI: str | None = None
    FB_TOKEN_URI: str | None = None
    FB_AUTH_CERT_URL: str | None = None
    FB_CERT_URL: str | None = None

    @property
    def ai_enabled(self) -> bool:
        return bool(self.OPENAI_API_KEY)

settings = Settings()
