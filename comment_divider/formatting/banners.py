from __future__ import annotations

import logging
from dataclasses import dataclass

from comment_divider.formatting.config import StyleConfig
from comment_divider.formatting.languages import DEFAULT_TABLE, LanguageTable, UnsupportedLanguageError
from comment_divider.formatting.rules import align, effective_width, repeat_filler, transform_case
from comment_divider.states import Height

logger = logging.getLogger(__name__)

# No delimiters are known for the language, so the fallback uses a generic line comment.
_FALLBACK_MARKER = "//"


@dataclass(frozen=True)
class _Frame:
    indent: str
    start: str
    end: str
    content_width: int

    def wrap(self, content: str) -> str:
        return f"{self.indent}{self.start} {content} {self.end}"


def _frame(language: str, indent_size: int, config: StyleConfig, languages: LanguageTable) -> _Frame:
    tokens = languages.require(language)
    indent_size = max(0, int(indent_size))
    width = effective_width(indent_size, config)
    # Two separating spaces: "<start> <content> <end>".
    content_width = max(0, width - len(tokens.start) - len(tokens.end) - 2)
    return _Frame(indent=" " * indent_size, start=tokens.start, end=tokens.end, content_width=content_width)


def unsupported_language_message(language: str) -> str:
    return f"{_FALLBACK_MARKER} Unsupported language: {language}"


def _fallback(err: UnsupportedLanguageError) -> str:
    logger.warning("no comment tokens for language: %r", err.language)
    return unsupported_language_message(err.language)


def build_solid_line(language: str, indent_size: int, config: StyleConfig, languages: LanguageTable) -> str:
    f = _frame(language, indent_size, config, languages)
    return f.wrap(repeat_filler(config.line_filler, f.content_width))


def build_subheader(
    text: str, language: str, indent_size: int, config: StyleConfig, languages: LanguageTable
) -> str:
    f = _frame(language, indent_size, config, languages)
    content = transform_case(text, config.subheader_transform)
    return f.wrap(align(content, f.content_width, config.subheader_align, config.subheader_filler))


def build_main_header(
    text: str, language: str, indent_size: int, config: StyleConfig, languages: LanguageTable
) -> str:
    f = _frame(language, indent_size, config, languages)
    content = transform_case(text, config.main_header_transform)

    if config.main_header_height != Height.BLOCK:
        return f.wrap(align(content, f.content_width, config.main_header_align, config.main_header_filler))

    # Borders use the header filler; the text line is padded with spaces.
    border = f.wrap(repeat_filler(config.main_header_filler, f.content_width))
    text_line = f.wrap(align(content, f.content_width, config.main_header_align, " "))
    return "\n".join([border, text_line, border])


def make_solid_line(
    language: str,
    indent_size: int,
    config: StyleConfig,
    languages: LanguageTable = DEFAULT_TABLE,
) -> str:
    try:
        return build_solid_line(language, indent_size, config, languages)
    except UnsupportedLanguageError as e:
        return _fallback(e)


def make_subheader(
    text: str,
    language: str,
    indent_size: int,
    config: StyleConfig,
    languages: LanguageTable = DEFAULT_TABLE,
) -> str:
    try:
        return build_subheader(text, language, indent_size, config, languages)
    except UnsupportedLanguageError as e:
        return _fallback(e)


def make_main_header(
    text: str,
    language: str,
    indent_size: int,
    config: StyleConfig,
    languages: LanguageTable = DEFAULT_TABLE,
) -> str:
    try:
        return build_main_header(text, language, indent_size, config, languages)
    except UnsupportedLanguageError as e:
        return _fallback(e)
