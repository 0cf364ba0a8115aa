"""Runtime settings, overridable through PAPERCRAFT_* environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_store_path() -> Path:
    return Path.home() / ".papercraft" / "saved_templates.json"


class PaperCraftSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAPERCRAFT_")

    store_path: Path = Field(default_factory=_default_store_path)
    output_dir: Path = Path(".")
    headless: bool = True
    log_level: str = "WARNING"
