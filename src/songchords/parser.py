"""Split a chord sheet into lyrics and chords.

Input is free-form text with chords positioned on the line above the lyric
they accompany::

    D              G
    Bapa, Engkau Sungguh Baik
             F#m  Bm  E         A
    Kasih-Mu Melimpah   Di Hidupku

The result keeps only the lyric lines (for summaries and search fields) and
the set of chords used (for the song's ``chords`` field and for transposing
stored content).
"""

from .classifiers.base import LineClassifier, LineType
from .classifiers.heuristic import HeuristicClassifier
from .models import LinePair, ParsedSong


def parse_lyrics_and_chords(
    text: str, classifier: LineClassifier | None = None
) -> ParsedSong:
    """Parse raw chord sheet text into a :class:`~songchords.models.ParsedSong`.

    Algorithm
    ---------
    Lines are trimmed and walked with a cursor. At each step the current line
    ``L`` and the next line ``N`` decide what happens:

    1. ``L`` is a chord line and ``N`` is a non-empty lyric line: collect the
       chords of ``L``, keep ``N`` as lyrics, advance by two.
    2. ``L`` is a non-empty lyric line: keep it, advance by one.
    3. ``L`` is a chord line with no lyric below it: collect its chords only.
    4. ``L`` is blank: keep an empty line so stanza breaks survive.

    Args:
        text:       Raw chord sheet text.
        classifier: Line detection strategy; defaults to
                    :class:`~songchords.classifiers.heuristic.HeuristicClassifier`.

    Returns:
        Lyrics joined by newlines and trimmed, chords unique and sorted, and
        the ordered line pairing. Whitespace-only input yields an empty result.
    """
    if not text.strip():
        return ParsedSong(raw_input="", lyrics="", chords=[])

    classifier = classifier or HeuristicClassifier()
    lines = [line.strip() for line in text.split("\n")]

    lyric_lines: list[str] = []
    pairs: list[LinePair] = []
    seen: dict[str, None] = {}  # insertion-ordered set

    i = 0
    while i < len(lines):
        current = lines[i]
        following = lines[i + 1] if i + 1 < len(lines) else ""
        lt = classifier.classify_line(current)

        if lt == LineType.CHORD:
            chords = classifier.extract_chords(current)
            seen.update(dict.fromkeys(chords))
            if following and not classifier.is_chord_line(following):
                lyric_lines.append(following)
                pairs.append(LinePair(chords=chords, lyric=following))
                i += 2
            else:
                # Chord-only passage (intro, instrumental)
                pairs.append(LinePair(chords=chords, lyric=None))
                i += 1
            continue

        if lt == LineType.LYRIC:
            lyric_lines.append(current)
            pairs.append(LinePair(chords=[], lyric=current))
        else:
            lyric_lines.append("")
            pairs.append(LinePair(chords=[], lyric=""))
        i += 1

    return ParsedSong(
        raw_input=text,
        lyrics="\n".join(lyric_lines).strip(),
        chords=sorted(seen),
        pairs=pairs,
    )
