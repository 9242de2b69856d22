from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import NamedTuple


class CommentTokens(NamedTuple):
    start: str
    end: str


class UnsupportedLanguageError(ValueError):
    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language: {language}")
        self.language = language


def tokens_from_delimiters(delimiters: Iterable[str]) -> CommentTokens:
    """Build tokens from a settings entry: ``["#"]`` or ``["/*", "*/"]``."""

    items = [str(d) for d in delimiters]
    if not items or len(items) > 2:
        raise ValueError("comment delimiters must hold one or two entries")
    start = items[0]
    end = items[1] if len(items) > 1 else start
    if not start or not end:
        raise ValueError("comment delimiters must be non-empty strings")
    return CommentTokens(start, end)


def _line(token: str) -> CommentTokens:
    return CommentTokens(token, token)


DEFAULT_LANGUAGES: Mapping[str, CommentTokens] = MappingProxyType(
    {
        "javascript": _line("//"),
        "typescript": _line("//"),
        "rust": _line("//"),
        "python": _line("#"),
        "html": CommentTokens("<!--", "-->"),
        "css": CommentTokens("/*", "*/"),
        "c": CommentTokens("/*", "*/"),
        "cpp": _line("//"),
        "java": _line("//"),
        "go": _line("//"),
        "php": _line("//"),
        "ruby": _line("#"),
        "shell": _line("#"),
        "bash": _line("#"),
        "yaml": _line("#"),
        "toml": _line("#"),
        "sql": _line("--"),
        "lua": _line("--"),
        "vim": _line('"'),
    }
)


class LanguageTable:
    """Read-only language id -> comment tokens mapping (ids are case-sensitive)."""

    def __init__(self, entries: Mapping[str, CommentTokens]) -> None:
        self._entries: Mapping[str, CommentTokens] = MappingProxyType(dict(entries))

    def __contains__(self, language: object) -> bool:
        return language in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, language: str) -> CommentTokens | None:
        return self._entries.get(language)

    def require(self, language: str) -> CommentTokens:
        tokens = self._entries.get(language)
        if tokens is None:
            raise UnsupportedLanguageError(language)
        return tokens

    def with_overrides(self, overrides: Mapping[str, Iterable[str] | CommentTokens]) -> LanguageTable:
        merged = dict(self._entries)
        for language, delimiters in overrides.items():
            if isinstance(delimiters, CommentTokens):
                merged[str(language)] = delimiters
            else:
                merged[str(language)] = tokens_from_delimiters(delimiters)
        return LanguageTable(merged)

    def languages(self) -> list[str]:
        return sorted(self._entries)

    def to_dict(self) -> dict[str, list[str]]:
        return {k: [v.start, v.end] for k, v in sorted(self._entries.items())}


DEFAULT_TABLE = LanguageTable(DEFAULT_LANGUAGES)
