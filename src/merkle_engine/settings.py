from __future__ import annotations
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # Default for the CLI only; trees always carry their own algorithm.
    hash_algorithm: str = Field(default="sha256", alias="MERKLE_HASH_ALGORITHM")

    log_level: str = Field(default="INFO", alias="MERKLE_LOG_LEVEL")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()  # load at import
