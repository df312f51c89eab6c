"""Transpose the chords inside annotated content.

Only the text of chord elements changes; tags, attributes, lyrics and
whitespace are copied through byte for byte. All chords are rewritten in a
single pass over the content, keyed by position, so a chord that has
already been transposed is never matched again by a later rule (sequential
search-and-replace per chord would turn C -> D -> E when shifting C and D up
a whole step).
"""

import html
import logging
import re
from collections.abc import Iterable

from .pitch import Spelling, interval_between, transpose_chord

logger = logging.getLogger(__name__)

# A chord element of either stored format, with its text in one piece:
#   <span class="c" title="">F#m</span>
#   <strong style="..." data-chord="true">D/F#</strong>
_CHORD_ELEMENT_RE = re.compile(
    r"(?P<open><(?P<tag>[a-zA-Z][\w-]*)"
    r"(?=[^>]*\s(?:class=[\"'](?:[^\"']*\s)?c(?:\s[^\"']*)?[\"']|data-chord=[\"']true[\"']))"
    r"[^>]*>)"
    r"(?P<text>[^<]*)"
    r"(?P<close></(?P=tag)\s*>)"
)

_DATA_KEY_RE = re.compile(r"(<pre\b[^>]*\bdata-key=\")[^\"]*(\")")

# Markup tags are skipped when rewriting content that has no chord elements.
_TAG_PAT = r"<[^>]*>"


class _ChordMap:
    """Memo of original -> transposed chord names for one transposition."""

    def __init__(self, semitones: int, spelling: Spelling, target: str):
        self.semitones = semitones
        self.spelling = spelling
        self.target = target
        self._map: dict[str, str] = {}

    def seed(self, chords: Iterable[str]) -> None:
        for chord in chords:
            self.get(chord)

    def get(self, chord: str) -> str:
        if chord not in self._map:
            self._map[chord] = transpose_chord(
                chord, self.semitones, spelling=self.spelling, target=self.target
            )
        return self._map[chord]

    def __len__(self) -> int:
        return len(self._map)


def _rewrite_elements(content: str, chord_map: _ChordMap) -> tuple[str, int]:
    def replace(m: re.Match) -> str:
        text = m.group("text")
        token = html.unescape(text.strip())
        if not token:
            return m.group(0)
        new_token = chord_map.get(token)
        if new_token == token:
            return m.group(0)
        lead = text[: len(text) - len(text.lstrip())]
        trail = text[len(text.rstrip()) :]
        return f"{m.group('open')}{lead}{html.escape(new_token, quote=False)}{trail}{m.group('close')}"

    return _CHORD_ELEMENT_RE.subn(replace, content)


def _rewrite_words(content: str, chords: list[str], chord_map: _ChordMap) -> tuple[str, int]:
    """Rewrite whole-word chord names outside of tags, in one pass."""
    alternatives = sorted(set(chords), key=len, reverse=True)
    pattern = re.compile(
        f"({_TAG_PAT})|(?<![\\w#])(" + "|".join(re.escape(c) for c in alternatives) + r")(?![\w#])"
    )

    def replace(m: re.Match) -> str:
        if m.group(1):
            return m.group(1)
        return chord_map.get(m.group(2))

    return pattern.subn(replace, content)


def transpose_content(
    content: str,
    from_chord: str,
    to_chord: str,
    chords: Iterable[str] | None = None,
    spelling: Spelling = Spelling.SIGN,
) -> str:
    """Return *content* with every chord moved from *from_chord*'s key to *to_chord*'s.

    Args:
        content:    Annotated content (either stored format).
        from_chord: The key the content is written in (the song's base chord).
        to_chord:   The requested key.
        chords:     Distinct chord names known to occur in the content, e.g. the
                    song's ``chords`` field. Used to rewrite content that carries
                    no chord elements.
        spelling:   Accidental policy for transposed roots.

    Returns:
        The transposed content. When the interval is zero *content* is returned
        unchanged. The ``data-key`` attribute of the ``<pre>`` block is set to
        *to_chord* otherwise.
    """
    semitones = interval_between(from_chord, to_chord)
    if semitones == 0 or not content:
        return content

    known = [c for c in (chords or []) if c]
    chord_map = _ChordMap(semitones, spelling, to_chord)
    chord_map.seed(known)

    result, count = _rewrite_elements(content, chord_map)
    if count == 0 and known:
        result, count = _rewrite_words(content, known, chord_map)

    result = _DATA_KEY_RE.sub(
        lambda m: f"{m.group(1)}{html.escape(to_chord)}{m.group(2)}", result, count=1
    )

    logger.debug(
        f"Transposed {from_chord} -> {to_chord} ({semitones:+d} semitones): "
        f"{count} chord occurrences, {len(chord_map)} distinct chords"
    )
    return result
