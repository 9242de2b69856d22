from __future__ import annotations

from enum import StrEnum


class Align(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Transform(StrEnum):
    NONE = "none"
    UPPER = "uppercase"
    LOWER = "lowercase"
    CAPITALIZE = "capitalize"


class Height(StrEnum):
    BLOCK = "block"
    LINE = "line"


_TRANSFORM_ALIASES = {
    "upper": Transform.UPPER,
    "lower": Transform.LOWER,
}


def _norm(value: object) -> str:
    return str(value or "").strip().lower()


def parse_align(value: object) -> Align | None:
    """Unrecognized values map to None, which aligns nothing."""

    if isinstance(value, Align):
        return value
    try:
        return Align(_norm(value))
    except ValueError:
        return None


def parse_transform(value: object) -> Transform | None:
    if isinstance(value, Transform):
        return value
    s = _norm(value)
    if s in _TRANSFORM_ALIASES:
        return _TRANSFORM_ALIASES[s]
    try:
        return Transform(s)
    except ValueError:
        return None


def parse_height(value: object) -> Height | None:
    if isinstance(value, Height):
        return value
    try:
        return Height(_norm(value))
    except ValueError:
        return None
