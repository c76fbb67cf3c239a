"""Greedy line breaking of text runs onto a layout context."""

from __future__ import annotations

import logging
import re
from typing import List

from .layout_context import LayoutContext

logger = logging.getLogger(__name__)

# Newlines in markup source are not semantic: a newline together with the
# whitespace around it becomes a single space.
_NEWLINE_RUN = re.compile(r"\s*[\r\n]\s*")


def normalize_whitespace(text: str) -> str:
    return _NEWLINE_RUN.sub(" ", text)


def next_break(text: str, start: int) -> int:
    """
    Return the end index of the next line-break candidate at or after ``start``.

    Spaces break before themselves; hyphens break after themselves so the
    hyphen stays with the preceding fragment. Returns -1 when no candidate
    remains.
    """
    for index in range(start, len(text)):
        char = text[index]
        if char == " ":
            return index
        if char == "-":
            return index + 1
    return -1


class LineBreaker:
    """Writes text runs onto the context's surface, wrapping at the right edge."""

    def __init__(self, context: LayoutContext) -> None:
        self.context = context

    @property
    def wrap_lines(self) -> bool:
        return self.context.config.wrap_lines

    def write_lines(self, text: str) -> List[str]:
        """
        Draw ``text`` at the cursor with the current style.

        Returns the drawn line fragments in order. The cursor ends just after
        the last fragment.
        """
        ctx = self.context
        normalized = normalize_whitespace(text)
        drawn: List[str] = []

        if not self.wrap_lines:
            self._flush_last(normalized, drawn)
            return drawn

        line_start = 0
        line = ""
        while True:
            candidate_end = -1
            if len(normalized) > 1:
                candidate_end = next_break(normalized, self._scan_start(normalized, line_start + len(line)))
            line_end = len(normalized) if candidate_end == -1 else candidate_end

            candidate = normalized[line_start:line_end]
            too_wide = ctx.measure(candidate) > ctx.remaining_width
            # A fragment that does not fit even on an empty line overflows.
            if too_wide and not (line == "" and ctx.at_left_margin):
                line_start += len(line)
                self._flush(line, drawn)
                ctx.new_line()
                logger.debug("Wrapped line at y=%.2f", ctx.cursor.y)
                line = ""
            else:
                line = candidate

            if candidate_end == -1:
                self._flush_last(normalized[line_start:], drawn)
                return drawn

    @staticmethod
    def _scan_start(text: str, end: int) -> int:
        # A pending line ending at a space breaks before it; one ending after
        # a hyphen already includes it.
        if end < len(text) and text[end] == " ":
            return end + 1
        return end

    def _trim(self, fragment: str) -> str:
        if self.context.at_left_margin:
            return fragment.lstrip(" ")
        return fragment

    def _flush(self, fragment: str, drawn: List[str]) -> str:
        fragment = self._trim(fragment)
        if fragment:
            self.context.fill_text(fragment)
            drawn.append(fragment)
        return fragment

    def _flush_last(self, fragment: str, drawn: List[str]) -> None:
        fragment = self._flush(fragment, drawn)
        self.context.advance(self.context.measure(fragment))
