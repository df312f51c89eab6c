"""Majority-vote chord line detection for free-form chord sheets.

Chord sheets pasted from the web carry no markers; chords simply sit on the
line above the lyric they belong to::

    D              G
    Bapa, Engkau Sungguh Baik

A line counts as a chord line when it is short (at most ``max_words``
whitespace-separated words) and strictly more than half of its words look
like chords. Long lines are treated as lyrics without looking at the words,
so a sentence such as "A B C D E F G" is still lyrics.
"""

from ..grammar import is_likely_chord
from .base import LineClassifier, LineType

DEFAULT_MAX_WORDS = 6


class HeuristicClassifier(LineClassifier):
    """Classify unmarked chord sheet lines by word count and chord majority."""

    name = "heuristic"

    def __init__(self, max_words: int = DEFAULT_MAX_WORDS):
        self.max_words = max_words

    def classify_line(self, line: str) -> LineType:
        stripped = line.strip()
        if not stripped:
            return LineType.BLANK

        words = stripped.split()
        if len(words) > self.max_words:
            return LineType.LYRIC

        chord_like = sum(1 for word in words if is_likely_chord(word))
        if chord_like > len(words) / 2:
            return LineType.CHORD
        return LineType.LYRIC

    def extract_chords(self, line: str) -> list[str]:
        return [word for word in line.split() if is_likely_chord(word)]
