from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from comment_divider.formatting.banners import make_main_header, make_solid_line, make_subheader
from comment_divider.formatting.config import StyleConfig
from comment_divider.formatting.languages import DEFAULT_TABLE, LanguageTable

logger = logging.getLogger(__name__)

DIVIDER = "divider"
HEADER = "header"

COMMANDS = (DIVIDER, HEADER)

_LABELS = {
    DIVIDER: "Comment Divider",
    HEADER: "Comment Header",
}


class UnknownCommandError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}")
        self.name = name


@dataclass(frozen=True)
class LineInfo:
    text: str
    indent_size: int
    language: str

    @classmethod
    def from_line(cls, text: str, language: str, *, tab_size: int = 4) -> LineInfo:
        indent = 0
        for ch in text:
            if ch == " ":
                indent += 1
            elif ch == "\t":
                indent += tab_size
            else:
                break
        return cls(text=text, indent_size=indent, language=language)


@dataclass(frozen=True)
class OutputSection:
    # Byte offsets into the UTF-8 encoded output text.
    start: int
    end: int
    label: str


@dataclass
class CommandOutput:
    text: str
    sections: list[OutputSection] = field(default_factory=list)


@dataclass(frozen=True)
class ArgumentCompletion:
    label: str
    new_text: str
    run_command: bool = False


def _labelled(text: str, label: str) -> CommandOutput:
    return CommandOutput(text=text, sections=[OutputSection(start=0, end=len(text.encode("utf-8")), label=label)])


def run_command(
    name: str,
    args: Sequence[str],
    *,
    line: LineInfo,
    config: StyleConfig,
    languages: LanguageTable = DEFAULT_TABLE,
) -> CommandOutput:
    # Banners are single comment lines; embedded line breaks become spaces.
    text = " ".join(" ".join(str(a).splitlines()) for a in args)

    if name == DIVIDER:
        if not text:
            result = make_solid_line(line.language, line.indent_size, config, languages)
        else:
            result = make_subheader(text, line.language, line.indent_size, config, languages)
    elif name == HEADER:
        result = make_main_header(text, line.language, line.indent_size, config, languages)
    else:
        raise UnknownCommandError(name)

    logger.debug("command=%s language=%s indent=%s chars=%s", name, line.language, line.indent_size, len(result))
    return _labelled(result, _LABELS[name])


def complete_argument(name: str, args: Sequence[str]) -> list[ArgumentCompletion]:
    if name in COMMANDS:
        return [ArgumentCompletion(label="Custom text", new_text="", run_command=False)]
    return []
