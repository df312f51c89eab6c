"""Strict chord line detection for sheets that mark chords explicitly.

Every chord is wrapped in square brackets and a chord line contains nothing
else::

    [D]            [G]
    Bapa, Engkau Sungguh Baik

A line mixing bracket groups with other text (inline ChordPro such as
``[D]Bapa``) is a lyric line.
"""

import re

from ..grammar import is_likely_chord
from .base import LineClassifier, LineType

# Any [token] group regardless of content
ANY_BRACKET_RE = re.compile(r"\[([^\]]+)\]")


class BracketedClassifier(LineClassifier):
    """Classify lines made entirely of ``[Chord]`` groups as chord lines."""

    name = "bracketed"

    def classify_line(self, line: str) -> LineType:
        stripped = line.strip()
        if not stripped:
            return LineType.BLANK

        tokens = ANY_BRACKET_RE.findall(stripped)
        remainder = ANY_BRACKET_RE.sub("", stripped).strip()
        if not tokens or remainder:
            return LineType.LYRIC

        if all(is_likely_chord(t.strip()) for t in tokens):
            return LineType.CHORD
        return LineType.LYRIC

    def extract_chords(self, line: str) -> list[str]:
        return [t.strip() for t in ANY_BRACKET_RE.findall(line) if is_likely_chord(t.strip())]
