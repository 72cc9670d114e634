"""Runtime settings for functool, read from FUNCTOOL_* env vars or a .env file."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Registry
    strict_registration: bool = False

    # Observations returned to the agent loop
    observation_prefix: str = "Observation: "
    report_fallbacks: bool = True

    # App
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FUNCTOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
