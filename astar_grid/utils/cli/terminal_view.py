"""ASCII terminal renderer for search grids."""

from __future__ import annotations

import sys
from typing import Any, Iterable, TextIO

from ...core.cell import CellKind
from ...core.grid import Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_CLEAR_SCREEN = "\x1b[H\x1b[2J"

# kind -> (glyph, colour)
GLYPHS: dict[CellKind, tuple[str, str]] = {
    CellKind.FREE: (" ", "reset"),
    CellKind.BLOCKED: ("%", "white"),
    CellKind.START: ("1", "green"),
    CellKind.END: ("2", "red"),
    CellKind.PATH: ("+", "yellow"),
    CellKind.FRONTIER: ("^", "cyan"),
    CellKind.EXPLORED: ("!", "blue"),
}


def render_lines(grid: Grid, colour: bool = False) -> list[str]:
    """Return one string per grid row, framed by a space on each side."""

    lines: list[str] = []
    for row in grid.kinds():
        parts: list[str] = [" "]
        for kind in row:
            glyph, col = GLYPHS[kind]
            if colour:
                parts.append(f"{_COLOURS[col]}{glyph}")
            else:
                parts.append(glyph)
        if colour:
            parts.append(_COLOURS["reset"])
        parts.append(" ")
        lines.append("".join(parts))
    return lines


class TerminalView:
    """Redraw the whole grid after each search step."""

    def __init__(
        self,
        enabled: bool = True,
        colour: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.enabled = enabled
        self.colour = colour
        self.stream = stream

    def render(self, grid: Grid, status: Iterable[str] = ()) -> None:
        """Clear the terminal and draw ``grid`` followed by ``status`` lines."""

        if not self.enabled:
            return

        out = self.stream if self.stream is not None else sys.stdout
        lines = render_lines(grid, colour=self.colour)
        lines.extend(status)
        out.write(_CLEAR_SCREEN)
        out.write("\n".join(lines) + "\n")
        out.flush()


def status_lines(result: Any) -> list[str]:
    """Describe a step result in a couple of lines for the footer."""

    lines = [f"Iteration step #{result.iteration}"]
    lines.append(
        f"open: {result.open_size}  closed: {result.closed_count}  "
        f"status: {result.status.value}"
    )
    if result.path:
        lines.append(f"path: {len(result.path) - 1} steps")
    return lines


__all__ = ["GLYPHS", "TerminalView", "render_lines", "status_lines"]
