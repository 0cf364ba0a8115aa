"""Settings document (JSON) import and export."""

from __future__ import annotations

import json
import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from papercraft.config import DEFAULT_CONFIG, PaperConfig, PaperSize, PatternType, new_config_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("pattern", "margins", "size")
_NESTED_GROUPS = ("margins", "background", "watermark", "pages")


class ConfigImportError(ValueError):
    """Raised when a settings document cannot be turned into a configuration."""


def config_to_document(config: PaperConfig) -> dict[str, Any]:
    return config.model_dump(mode="json", by_alias=True)


def dump_config(config: PaperConfig) -> str:
    """Serialize a configuration to the JSON settings document."""

    return json.dumps(config_to_document(config), indent=2, ensure_ascii=False)


def _fall_back(merged: dict[str, Any], field: str, choices: type[Enum], fallback: Enum) -> None:
    value = merged.get(field)
    if isinstance(value, str) and value in {choice.value for choice in choices}:
        return
    logger.warning("Unrecognized %s %r in settings document, using %r", field, value, fallback.value)
    merged[field] = fallback.value


def merge_document(document: dict[str, Any], defaults: PaperConfig = DEFAULT_CONFIG) -> PaperConfig:
    """Lay a partial settings document over ``defaults`` and validate the result."""

    merged = config_to_document(defaults)
    for key, value in document.items():
        if key in _NESTED_GROUPS and isinstance(value, dict):
            merged[key] = {**merged.get(key, {}), **value}
        else:
            merged[key] = value

    _fall_back(merged, "pattern", PatternType, PatternType.BLANK)
    _fall_back(merged, "size", PaperSize, PaperSize.A4)

    try:
        return PaperConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigImportError(f"Invalid settings document: {exc}") from exc


def load_config(text: str, defaults: PaperConfig = DEFAULT_CONFIG) -> PaperConfig:
    """Import a settings document; the result always carries a fresh id.

    Nothing is returned unless the whole document is usable, so a failed
    import leaves the caller's configuration as it was.
    """

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigImportError(f"Settings document is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise ConfigImportError("Settings document must be a JSON object")

    missing = [name for name in REQUIRED_FIELDS if not document.get(name)]
    if missing:
        raise ConfigImportError(f"Settings document is missing required field(s): {', '.join(missing)}")

    config = merge_document(document, defaults)
    return config.model_copy(update={"id": new_config_id("imported")})


def load_config_file(path: Path, defaults: PaperConfig = DEFAULT_CONFIG) -> PaperConfig:
    if not path.exists() or not path.is_file():
        raise ConfigImportError(f"Settings file not found: {path}")

    try:
        return load_config(path.read_text(encoding="utf-8"), defaults)
    except ConfigImportError:
        logger.warning("Rejected settings file %s", path)
        raise


def settings_filename(today: date | None = None) -> str:
    return f"paper-settings-{(today or date.today()).isoformat()}.json"


def export_settings(config: PaperConfig, output_dir: Path, today: date | None = None) -> Path:
    """Write the configuration as a date-stamped JSON settings file."""

    output_dir.mkdir(parents=True, exist_ok=True)
    output = output_dir / settings_filename(today)
    output.write_text(dump_config(config), encoding="utf-8")
    return output
