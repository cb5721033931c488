import os
from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {_LEVELS}, got '{value}'")
        return value

    @classmethod
    def load(cls) -> "Settings":
        overrides = {}
        if os.getenv("LOG_LEVEL"):
            overrides["LOG_LEVEL"] = os.environ["LOG_LEVEL"]
        if os.getenv("UNDERBAR_LOG_FORMAT"):
            overrides["LOG_FORMAT"] = os.environ["UNDERBAR_LOG_FORMAT"]
        return cls(**overrides)


settings = Settings.load()
