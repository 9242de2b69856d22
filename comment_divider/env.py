from __future__ import annotations

import json
import os


def env_truthy(name: str) -> bool:
    v = str(os.getenv(name, "")).strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def env_is_set(name: str) -> bool:
    return bool(str(os.getenv(name, "")).strip())


def env_json_object(name: str) -> dict | None:
    raw = str(os.getenv(name, "")).strip()
    if not raw:
        return None
    obj = json.loads(raw)
    if not isinstance(obj, dict):
        raise ValueError(f"{name} must be a JSON object")
    return obj
