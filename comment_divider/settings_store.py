from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from comment_divider.env import env_is_set, env_json_object, env_truthy
from comment_divider.models import StyleSettings

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "comment-divider.json"

# Editor settings files usually nest extension settings under the extension id.
_SETTINGS_KEY = "comment_divider"

_ENV_SETTINGS_PATH = "COMMENT_DIVIDER_SETTINGS_PATH"
_ENV_LENGTH = "COMMENT_DIVIDER_LENGTH"
_ENV_INCLUDE_INDENT = "COMMENT_DIVIDER_INCLUDE_INDENT"
_ENV_LANGUAGES = "COMMENT_DIVIDER_LANGUAGES"


def settings_path(*, workdir: Path) -> Path:
    override = str(os.getenv(_ENV_SETTINGS_PATH, "") or "").strip()
    if override:
        return Path(override)
    return workdir / SETTINGS_FILENAME


def _settings_object(raw: str, path: Path) -> dict[str, Any]:
    try:
        obj = json.loads(raw) if raw.strip() else {}
    except Exception as e:
        raise ValueError(f"{path.name} is not valid JSON") from e
    if not isinstance(obj, dict):
        raise ValueError(f"{path.name} must hold a JSON object")
    nested = obj.get(_SETTINGS_KEY)
    if isinstance(nested, dict):
        return nested
    return obj


def read_settings(path: Path) -> StyleSettings:
    if not path.exists():
        return StyleSettings()

    obj = _settings_object(path.read_text(encoding="utf-8"), path)
    try:
        return StyleSettings.model_validate(obj)
    except ValidationError as e:
        raise ValueError(f"invalid settings in {path.name}: {e.errors()[0].get('msg')}") from e


def load_settings(path: Path) -> StyleSettings:
    """Settings file plus environment overlays (env wins)."""

    settings = read_settings(path)

    updates: dict[str, Any] = {}
    if env_is_set(_ENV_LENGTH):
        raw_length = str(os.getenv(_ENV_LENGTH, "")).strip()
        try:
            updates["length"] = int(raw_length)
        except ValueError:
            logger.warning("ignoring %s=%r: not an integer", _ENV_LENGTH, raw_length)
    if env_is_set(_ENV_INCLUDE_INDENT):
        updates["should_length_include_indent"] = env_truthy(_ENV_INCLUDE_INDENT)

    extra_languages = env_json_object(_ENV_LANGUAGES)
    if extra_languages:
        updates["languages_map"] = {**settings.languages_map, **extra_languages}

    if not updates:
        return settings

    logger.debug("applying env overrides: %s", sorted(updates))
    try:
        return StyleSettings.model_validate({**settings.model_dump(), **updates})
    except ValidationError as e:
        raise ValueError(f"invalid settings from environment: {e.errors()[0].get('msg')}") from e
