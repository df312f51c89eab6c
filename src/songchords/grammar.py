"""Chord-name grammar.

A chord token is read left to right as three parts::

    root      [A-G] followed by an optional accidental (# or b)
    quality   zero or more modifiers: maj, min, dim, aug, sus, sus2, sus4,
              add<digits>, m, or a single digit
    bass      optional "/" followed by another root

Examples::

    G        -> Chord(root="G")
    F#m      -> Chord(root="F#", quality="m")
    Csus4/G  -> Chord(root="C", quality="sus4", bass="G")
    Gadd9    -> Chord(root="G", quality="add9")

:func:`parse_chord` is the strict tokenizer. :func:`is_likely_chord` is the
looser test used when guessing whether a line of raw text is a chord line.
:data:`CHORD_SCAN_RE` finds chord-shaped tokens inside running text and is
assembled from the same fragments as the tokenizer.
"""

import re

from .models import Chord

# ---------------------------------------------------------------------------
# Grammar fragments
# ---------------------------------------------------------------------------

ROOT_PAT = r"[A-G][#b]?"

# Longer alternatives come first so "maj" is never read as "m" + "aj".
QUALITY_ALTERNATIVES = (
    r"maj",
    r"min",
    r"dim",
    r"aug",
    r"sus[24]?",
    r"add\d+",
    r"m",
    r"\d",
)
QUALITY_PAT = "(?:" + "|".join(QUALITY_ALTERNATIVES) + ")*"

BASS_PAT = r"/" + ROOT_PAT

_ROOT_RE = re.compile(ROOT_PAT)
_QUALITY_STEP_RE = re.compile("|".join(QUALITY_ALTERNATIVES))

# Root + everything after it, used where only the root matters.
_DECOMPOSE_RE = re.compile(r"^([A-G][#b]?)(.*)$", re.DOTALL)

# Chord-shaped token inside running text. "#" counts as part of the token on
# both sides so "F#" is never split into "F" + "#".
CHORD_SCAN_RE = re.compile(
    r"(?<![\w#/])" + ROOT_PAT + QUALITY_PAT + "(?:" + BASS_PAT + r")?(?![\w#])"
)

# Looser whole-word forms accepted on chord lines of raw text.
LIKELY_CHORD_RE = re.compile(
    r"^[A-G][#b]?(?:m|maj|min|dim|aug|sus|add)?\d*(?:/[A-G][#b]?)?$"
)
SIMPLE_CHORD_RE = re.compile(r"^[A-G][#b]?m?$")


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


def _read_root(text: str, pos: int) -> int | None:
    """Return the end offset of a root note starting at *pos*, or None."""
    m = _ROOT_RE.match(text, pos)
    return m.end() if m else None


def parse_chord(token: str) -> Chord | None:
    """Tokenize *token* into a :class:`~songchords.models.Chord`.

    Returns None unless the whole token is consumed by the grammar.
    """
    if not token:
        return None

    root_end = _read_root(token, 0)
    if root_end is None:
        return None

    pos = root_end
    while pos < len(token):
        m = _QUALITY_STEP_RE.match(token, pos)
        if not m:
            break
        pos = m.end()
    quality = token[root_end:pos]

    bass = None
    if pos < len(token) and token[pos] == "/":
        bass_end = _read_root(token, pos + 1)
        if bass_end is None:
            return None
        bass = token[pos + 1 : bass_end]
        pos = bass_end

    if pos != len(token):
        return None

    return Chord(root=token[:root_end], quality=quality, bass=bass)


def is_chord(token: str) -> bool:
    return parse_chord(token) is not None


def is_likely_chord(word: str) -> bool:
    """Return True if *word* looks like a chord on a raw chord line."""
    if not word:
        return False
    return bool(LIKELY_CHORD_RE.match(word) or SIMPLE_CHORD_RE.match(word)) or is_chord(word)


def decompose_chord(token: str) -> tuple[str, str] | None:
    """Split *token* into ``(root, suffix)``; None if it does not start with a root."""
    m = _DECOMPOSE_RE.match(token)
    if not m:
        return None
    return m.group(1), m.group(2)
