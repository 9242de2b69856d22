from __future__ import annotations

from dataclasses import dataclass

from comment_divider.states import Align, Height, Transform


@dataclass(frozen=True)
class StyleConfig:
    # Target width of a generated line, delimiters included.
    total_width: int = 80
    # When set, the current indent is taken out of total_width.
    width_includes_indent: bool = False

    # Main header
    main_header_filler: str = "-"
    main_header_height: Height = Height.BLOCK
    main_header_align: Align | None = Align.CENTER
    main_header_transform: Transform = Transform.NONE

    # Subheader (divider with text)
    subheader_filler: str = "-"
    subheader_align: Align | None = Align.CENTER
    subheader_transform: Transform = Transform.NONE

    # Solid divider
    line_filler: str = "-"

    def __post_init__(self) -> None:
        if int(self.total_width) <= 0:
            raise ValueError("total_width must be > 0")
        for name in ("main_header_filler", "subheader_filler", "line_filler"):
            if not getattr(self, name):
                raise ValueError(f"{name} must be a non-empty string")
