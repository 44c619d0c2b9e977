"""ANSI text utilities - measuring and wrapping strings with escape codes."""

from __future__ import annotations

import re

# Pattern to match ANSI escape sequences (including ~ terminator for F-keys, etc.)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*[A-Za-z~]')


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(_ANSI_ESCAPE.sub('', s))


def _chunks(s: str) -> list[tuple[str, bool]]:
    """Split into (piece, visible) pairs; escapes are whole invisible pieces."""
    pieces: list[tuple[str, bool]] = []
    pos = 0
    for match in _ANSI_ESCAPE.finditer(s):
        pieces.extend((ch, True) for ch in s[pos:match.start()])
        pieces.append((match.group(0), False))
        pos = match.end()
    pieces.extend((ch, True) for ch in s[pos:])
    return pieces


def hard_wrap(s: str, width: int) -> list[str]:
    """
    Break one line into pieces of at most ``width`` visible characters.

    Escape sequences stay attached to the character that follows them.
    An empty line stays a single empty line.
    """
    if width <= 0 or visible_len(s) <= width:
        return [s]
    lines: list[str] = []
    current: list[str] = []
    count = 0
    for piece, visible in _chunks(s):
        if visible and count == width:
            lines.append(''.join(current))
            current, count = [], 0
        current.append(piece)
        if visible:
            count += 1
    if current:
        lines.append(''.join(current))
    return lines


def measure(text: str, max_width: int = 0) -> tuple[int, int]:
    """
    Visible (width, height) of multi-line text.

    With ``max_width`` > 0 long lines are hard-wrapped first.
    """
    lines: list[str] = []
    for line in text.split('\n'):
        lines.extend(hard_wrap(line, max_width) if max_width > 0 else [line])
    width = max((visible_len(line) for line in lines), default=0)
    return width, len(lines)
