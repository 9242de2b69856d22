from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, Field, field_validator

from comment_divider.formatting.config import StyleConfig
from comment_divider.formatting.languages import DEFAULT_TABLE, LanguageTable, tokens_from_delimiters
from comment_divider.states import Height, Transform, parse_align, parse_height, parse_transform

logger = logging.getLogger(__name__)

_M = TypeVar("_M")


def _mode(parse: Callable[[object], _M | None], raw: str, fallback: _M, name: str) -> _M:
    parsed = parse(raw)
    if parsed is None:
        logger.warning("unrecognized %s=%r; using %s", name, raw, fallback)
        return fallback
    return parsed


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    request_id: str | None = None


class StyleSettings(BaseModel):
    """Persisted settings document; key names follow the editor extension settings."""

    length: int = Field(default=80, ge=1)
    should_length_include_indent: bool = False
    main_header_filler: str = Field(default="-", min_length=1)
    main_header_height: str = "block"
    main_header_align: str = "center"
    main_header_transform: str = "none"
    subheader_filler: str = Field(default="-", min_length=1)
    # Accepted for compatibility; subheaders are always a single line.
    subheader_height: str = "line"
    subheader_align: str = "center"
    subheader_transform: str = "none"
    line_filler: str = Field(default="-", min_length=1)
    languages_map: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("languages_map")
    @classmethod
    def _check_languages_map(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        for language, delimiters in v.items():
            if not language:
                raise ValueError("language id must be non-empty")
            tokens_from_delimiters(delimiters)
        return v

    def to_style_config(self) -> StyleConfig:
        return StyleConfig(
            total_width=self.length,
            width_includes_indent=self.should_length_include_indent,
            main_header_filler=self.main_header_filler,
            main_header_height=_mode(parse_height, self.main_header_height, Height.LINE, "main_header_height"),
            main_header_align=_mode(parse_align, self.main_header_align, None, "main_header_align"),
            main_header_transform=_mode(
                parse_transform, self.main_header_transform, Transform.NONE, "main_header_transform"
            ),
            subheader_filler=self.subheader_filler,
            subheader_align=_mode(parse_align, self.subheader_align, None, "subheader_align"),
            subheader_transform=_mode(
                parse_transform, self.subheader_transform, Transform.NONE, "subheader_transform"
            ),
            line_filler=self.line_filler,
        )

    def to_language_table(self, base: LanguageTable = DEFAULT_TABLE) -> LanguageTable:
        if not self.languages_map:
            return base
        return base.with_overrides(self.languages_map)


class SettingsResponse(BaseModel):
    settings: StyleSettings


class LanguagesResponse(BaseModel):
    languages: dict[str, list[str]]


class CommandRequest(BaseModel):
    args: list[str] = Field(default_factory=list)
    # Current line in the host buffer; its leading whitespace is the indent.
    line: str = ""
    language: str = Field(min_length=1)
    # Overrides the indent derived from `line` when set.
    indent_size: int | None = Field(default=None, ge=0)
    tab_size: int = Field(default=4, ge=1, le=16)


class OutputSectionOut(BaseModel):
    start: int
    end: int
    label: str


class CommandOutputOut(BaseModel):
    text: str
    sections: list[OutputSectionOut]


class CompletionRequest(BaseModel):
    args: list[str] = Field(default_factory=list)


class ArgumentCompletionOut(BaseModel):
    label: str
    new_text: str
    run_command: bool


class CompletionsResponse(BaseModel):
    completions: list[ArgumentCompletionOut]

