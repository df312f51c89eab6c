from dataclasses import dataclass, field

DEFAULT_BASE_CHORD = "C"


@dataclass(frozen=True)
class Chord:
    """A tokenized chord name.

    Example: "Csus4/G" -> Chord(root="C", quality="sus4", bass="G")
    """

    root: str  # e.g. "C", "F#", "Bb"
    quality: str = ""  # everything between root and slash, e.g. "m7", "sus4", "add9"
    bass: str | None = None  # slash-chord bass note, None for plain chords

    def __str__(self) -> str:
        if self.bass:
            return f"{self.root}{self.quality}/{self.bass}"
        return f"{self.root}{self.quality}"


@dataclass
class LinePair:
    """One step of the chord-above-lyric reconstruction.

    Standalone chord lines have ``lyric=None``; lyric lines with no chord line
    above them have an empty ``chords`` list. Blank lines are kept as
    ``LinePair(chords=[], lyric="")`` so stanza breaks survive.
    """

    chords: list[str] = field(default_factory=list)
    lyric: str | None = None


@dataclass
class ParsedSong:
    """Result of splitting raw chord sheet text into lyrics and chords."""

    raw_input: str
    lyrics: str
    chords: list[str] = field(default_factory=list)  # unique, sorted
    pairs: list[LinePair] = field(default_factory=list)


@dataclass
class Song:
    """A stored song record as handed over by the songbook backend."""

    title: str
    artist: str
    base_chord: str = DEFAULT_BASE_CHORD
    lyrics_and_chords: str = ""  # annotated content
    chords: str = ""  # comma-joined, derived from the content

    def chord_list(self) -> list[str]:
        """Return the comma-joined ``chords`` field as a list."""
        return [c.strip() for c in self.chords.split(",") if c.strip()]

    def with_chords(self, chords: list[str]) -> "Song":
        """Set ``chords`` from a list and return self."""
        self.chords = ",".join(chords)
        return self
