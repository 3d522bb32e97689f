from typing import Literal
from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    app_name: str = "docflow"
    app_env: str = Field("dev", alias="APP_ENV")
    # required: no fallback signing key, startup fails without it
    secret_key: str = Field(min_length=1, alias="SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    database_url: str = Field("sqlite:///./docflow.db", alias="DATABASE_URL")

    ingestion_url: str = Field("http://localhost:5000/ingest", alias="INGESTION_URL")
    ingestion_timeout_seconds: float = Field(30, alias="INGESTION_TIMEOUT_SECONDS")
    ingestion_status_backend: Literal["db", "memory"] = Field("db", alias="INGESTION_STATUS_BACKEND")

    documents_require_auth: bool = Field(False, alias="DOCUMENTS_REQUIRE_AUTH")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
