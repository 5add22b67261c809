from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MC_", env_file=".env", extra="ignore")

    CASES_DIR: str = Field(default="./testcases")

    # Logging
    LOG_LEVEL: str = Field(default="WARNING")
    LOG_FILE: str | None = Field(default=None)

settings = Settings()
