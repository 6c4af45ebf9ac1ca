from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import AnyHttpUrl


class Settings(BaseSettings):
    PROJECT_NAME: str = "Soundboard API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = []

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_NAME: str = "soundboard"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: float = 30.0
    DB_TIMEOUT: float = 10.0
    DB_ECHO: bool = False
    DATABASE_URL: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Object storage (GCS through its S3-compatible XML API)
    GCP_BUCKET_NAME: str = ""
    STORAGE_ENDPOINT_URL: str = "https://storage.googleapis.com"
    STORAGE_ACCESS_KEY_ID: str = ""
    STORAGE_SECRET_ACCESS_KEY: str = ""
    STORAGE_REGION: str = "auto"
    STORAGE_TIMEOUT: float = 10.0

    # Text-to-speech
    GCP_PROJECT_ID: Optional[str] = None
    GCP_CREDENTIALS_FILE: str = "gcp-key.json"
    TTS_LANGUAGE_CODE: str = "id-ID"
    TTS_TIMEOUT: float = 30.0

    # Uploads
    PROFILE_PICTURE_MAX_BYTES: int = 5 * 1024 * 1024

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
