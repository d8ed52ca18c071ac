from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FIELDREPEAT_", case_sensitive=False)

    select_class: str = "browser-default"
    select_call_to_action: str = "Select an option..."
    select_reset_text: str = "None"
    upload_button_text: str = "Upload"
    templates_dir: Path | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
