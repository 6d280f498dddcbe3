from __future__ import annotations

import os
import sys

_COLOR: bool | None = None


def supports_color() -> bool:
    global _COLOR
    if _COLOR is None:
        _COLOR = (
            os.environ.get("NO_COLOR", "") == ""
            and os.environ.get("TERM", "") != "dumb"
            and sys.stdout.isatty()
        )
    return _COLOR


def force_color(enabled: bool | None) -> None:
    global _COLOR
    _COLOR = enabled


def style(text: str, *codes: int) -> str:
    if not supports_color():
        return text
    return f"\033[{';'.join(str(c) for c in codes)}m{text}\033[0m"


def green(text: str) -> str:
    return style(text, 32)


def red(text: str) -> str:
    return style(text, 31)


def dim(text: str) -> str:
    return style(text, 2)


def bold(text: str) -> str:
    return style(text, 1)
