"""Saved-template store persisted as a JSON file.

The file is re-read on every access and rewritten whole on every change; it is
not safe for concurrent writers (the last write wins).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from papercraft.config import PaperConfig, new_config_id

logger = logging.getLogger(__name__)

_TEMPLATE_LIST = TypeAdapter(list[PaperConfig])


class TemplateStoreError(RuntimeError):
    """Raised when the saved-template file cannot be read or written."""


class SavedTemplateStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    def list(self) -> list[PaperConfig]:
        if not self.path.exists():
            return []

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateStoreError(f"Could not read saved templates from {self.path}: {exc}") from exc

        if not raw.strip():
            return []

        try:
            return _TEMPLATE_LIST.validate_json(raw)
        except ValidationError as exc:
            logger.warning("Saved template file %s is corrupt", self.path)
            raise TemplateStoreError(f"Saved templates in {self.path} are corrupt: {exc}") from exc

    def get(self, template_id: str) -> PaperConfig | None:
        for template in self.list():
            if template.id == template_id:
                return template
        return None

    def append(self, config: PaperConfig) -> None:
        self._write([*self.list(), config])

    def remove(self, template_id: str) -> bool:
        """Drop every entry with ``template_id``; returns whether any was removed."""

        templates = self.list()
        remaining = [template for template in templates if template.id != template_id]
        if len(remaining) == len(templates):
            return False
        self._write(remaining)
        return True

    def save_as(self, config: PaperConfig, name: str) -> PaperConfig:
        """Store a copy of ``config`` under a new id and display name."""

        name = name.strip()
        if not name:
            raise ValueError("Template name must not be empty")

        saved = config.model_copy(update={"id": new_config_id("saved"), "name": name})
        self.append(saved)
        return saved

    def _write(self, templates: list[PaperConfig]) -> None:
        payload = json.dumps(
            [template.model_dump(mode="json", by_alias=True) for template in templates],
            indent=2,
            ensure_ascii=False,
        )
        # The store file is only replaced once the staged copy is fully written.
        staging = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            staging.write_text(payload, encoding="utf-8")
            staging.replace(self.path)
        except OSError as exc:
            logger.warning("Failed to write saved templates to %s", self.path)
            raise TemplateStoreError(f"Could not write saved templates to {self.path}: {exc}") from exc
