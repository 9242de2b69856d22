from __future__ import annotations

from comment_divider.formatting.config import StyleConfig
from comment_divider.states import Align, Transform


def transform_case(text: str, mode: Transform | None) -> str:
    if mode == Transform.UPPER:
        return text.upper()
    if mode == Transform.LOWER:
        return text.lower()
    if mode == Transform.CAPITALIZE:
        if not text:
            return ""
        return text[0].upper() + text[1:].lower()
    return text


def repeat_filler(filler: str, width: int) -> str:
    """Repeat ``filler`` to exactly ``width`` chars; the last repeat may be cut short."""

    if not filler:
        raise ValueError("filler must be a non-empty string")
    width = max(0, int(width))
    if width == 0:
        return ""
    reps = width // len(filler) + 1
    return (filler * reps)[:width]


def align(text: str, total_width: int, align_mode: Align | None, filler: str) -> str:
    # Overflow is kept as-is; text is never truncated.
    if len(text) >= total_width:
        return text

    remaining = total_width - len(text)

    if align_mode == Align.LEFT:
        return text + repeat_filler(filler, remaining)
    if align_mode == Align.RIGHT:
        return repeat_filler(filler, remaining) + text
    if align_mode == Align.CENTER:
        left = remaining // 2
        right = remaining - left
        return repeat_filler(filler, left) + text + repeat_filler(filler, right)
    return text


def effective_width(indent_size: int, config: StyleConfig) -> int:
    if config.width_includes_indent:
        return max(0, int(config.total_width) - int(indent_size))
    return int(config.total_width)
