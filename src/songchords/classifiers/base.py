from abc import ABC, abstractmethod
from enum import Enum, auto


class LineType(Enum):
    BLANK = auto()  # empty or whitespace only
    CHORD = auto()  # chord line sitting above a lyric: D  G  Am7
    LYRIC = auto()  # everything else


class LineClassifier(ABC):
    """Abstract base class for chord-line detection strategies."""

    name: str

    @abstractmethod
    def classify_line(self, line: str) -> LineType:
        """Return the :class:`LineType` of a single line of raw text."""

    @abstractmethod
    def extract_chords(self, line: str) -> list[str]:
        """Return the chord names found on a CHORD line, left to right."""

    def is_chord_line(self, line: str) -> bool:
        return self.classify_line(line) == LineType.CHORD
