# moderation/config/settings.py

from functools import lru_cache
from typing import Literal, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModerationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MODERATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Default filter ---
    strict: bool = False

    # --- Schema ---
    status_column: str = Field("status", min_length=1)
    moderated_at_column: str = Field("moderated_at", min_length=1)
    moderated_by_column: Optional[str] = "moderated_by"

    # --- Stored status values ---
    # Digit strings from the environment are read as ints.
    pending_value: Union[int, str] = Field(0, union_mode="left_to_right")
    approved_value: Union[int, str] = Field(1, union_mode="left_to_right")
    rejected_value: Union[int, str] = Field(2, union_mode="left_to_right")

    # --- Database ---
    database_url: str = "sqlite+aiosqlite:///./moderation.db"

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> ModerationSettings:
    return ModerationSettings()
