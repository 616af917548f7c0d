from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "Versaflake"
    LOG_LEVEL: str = "INFO"

    # ID layout: must be identical on every node of a deployment
    FLAKE_EPOCH_MS: int = 1_735_689_600_000  # 2025-01-01T00:00:00Z
    FLAKE_TIMESTAMP_BITS: int = 41
    FLAKE_NODE_ID_BITS: int = 10
    FLAKE_SEQUENCE_BITS: int = 12
    FLAKE_STRICT_MODE: bool = False  # True: raise on clock regression instead of waiting

    # This process's node id, unique within the deployment
    FLAKE_NODE_ID: int = 0

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper()


settings = Settings()
