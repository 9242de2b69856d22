from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the repo root (containing `comment_divider/`) is importable when pytest
# picks `tests/` as the rootdir (e.g., single-file runs).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


_ENV_KEYS = (
    "COMMENT_DIVIDER_SETTINGS_PATH",
    "COMMENT_DIVIDER_WORKDIR",
    "COMMENT_DIVIDER_LENGTH",
    "COMMENT_DIVIDER_INCLUDE_INDENT",
    "COMMENT_DIVIDER_LANGUAGES",
    "COMMENT_DIVIDER_LOG_LEVEL",
    "COMMENT_DIVIDER_DISABLE_FILE_LOG",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Host-level overrides must not leak into tests.
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def default_config():
    from comment_divider.formatting.config import StyleConfig  # local import to keep collection cheap

    return StyleConfig()
