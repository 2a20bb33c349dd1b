import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    APP_NAME: str = "Event Marketplace Service"
    API_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8002
    RELOAD: bool = False

    JWT_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 1440  # 24 hours default

    # Full URL wins over the individual parts below (used by tests / sqlite)
    DATABASE_URL: str | None = None
    DB_USER: str | None = None
    DB_PASS: str | None = None
    DB_HOST: str | None = None
    DB_PORT: str | None = None
    DB_NAME: str | None = None
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5

    # Escrow gateway
    ESCROW_API_EMAIL: str | None = None
    ESCROW_API_KEY: str | None = None
    ESCROW_API_BASE_URL: str = "https://api.escrow-sandbox.com/2017-09-01"
    ESCROW_API_TIMEOUT: int = 30

    # Object storage
    AWS_ACCESS_KEY: str | None = None
    AWS_SECRET_KEY: str | None = None
    AWS_REGION: str | None = None
    BUCKET_NAME: str | None = None
    STORAGE_ENDPOINT_URL: str | None = None
    STORAGE_PUBLIC_BASE_URL: str | None = None
    MAX_UPLOAD_SIZE_MB: int = 10
    MAX_UPLOAD_FILES: int = 5

    # Email configuration for guest invitations
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_USE_SSL: bool = False
    EMAIL_SENDER: str = "noreply@vibes-events.com"

    CORS_ORIGINS: str = "http://localhost:8080,http://127.0.0.1:8002"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
