"""Pitch-class arithmetic for chord transposition.

The chromatic scale is kept twice, once with sharp spellings and once with
flat spellings. Index *i* names the same pitch class in both lists.
"""

from enum import Enum

from .grammar import decompose_chord, parse_chord

SHARPS = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
FLATS = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Pitch classes of the major keys conventionally written with flats:
# Db, Eb, F, Ab, Bb.
_FLAT_MAJOR_KEYS = {1, 3, 5, 8, 10}

# Target keys offered to the listener: (label, value)
KEYS = [
    ("C", "C"),
    ("C#/Db", "C#"),
    ("D", "D"),
    ("D#/Eb", "D#"),
    ("E", "E"),
    ("F", "F"),
    ("F#/Gb", "F#"),
    ("G", "G"),
    ("G#/Ab", "G#"),
    ("A", "A"),
    ("A#/Bb", "A#"),
    ("B", "B"),
]

# Relative transposition choices: (label, semitones)
TRANSPOSE_OPTIONS = [
    ("Original", 0),
    ("+1 (Half step up)", 1),
    ("+2 (Whole step up)", 2),
    ("+3", 3),
    ("+4", 4),
    ("+5", 5),
    ("+6 (Tritone)", 6),
    ("-6 (Tritone)", -6),
    ("-5", -5),
    ("-4", -4),
    ("-3", -3),
    ("-2 (Whole step down)", -2),
    ("-1 (Half step down)", -1),
]


class Spelling(Enum):
    """How a transposed root chooses between sharp and flat names."""

    SIGN = "sign"  # sharps when shifting up (or by zero), flats when shifting down
    KEY = "key"  # follow the destination key's conventional accidentals


def index_of(root: str) -> int | None:
    """Return the pitch class 0..11 of *root*, or None if it is not a note name."""
    if root in SHARPS:
        return SHARPS.index(root)
    if root in FLATS:
        return FLATS.index(root)
    return None


def prefers_flats(key: str) -> bool:
    """Return True if chords in *key* are conventionally spelled with flats.

    A root written with ``b`` always prefers flats and one written with ``#``
    always prefers sharps. Natural roots follow the major-key signature; minor
    keys (``Dm``, ``Gm``) use their relative major.
    """
    parts = decompose_chord(key)
    if parts is None:
        return False
    root, suffix = parts
    if root.endswith("b"):
        return True
    if root.endswith("#"):
        return False
    index = index_of(root)
    if index is None:
        return False
    if suffix.startswith("m") and not suffix.startswith("maj"):
        index = (index + 3) % 12
    return index in _FLAT_MAJOR_KEYS


def _use_flats(semitones: int, spelling: Spelling, target: str | None) -> bool:
    if spelling is Spelling.KEY and target:
        return prefers_flats(target)
    return semitones < 0


def _shift(root: str, semitones: int, flats: bool) -> str | None:
    index = index_of(root)
    if index is None:
        return None
    new_index = (index + semitones) % 12
    return FLATS[new_index] if flats else SHARPS[new_index]


def transpose_chord(
    token: str,
    semitones: int,
    spelling: Spelling = Spelling.SIGN,
    target: str | None = None,
) -> str:
    """Shift the root (and slash bass) of *token* by *semitones*.

    Anything after the root that is not a slash bass is kept verbatim. Tokens
    whose root cannot be resolved are returned unchanged.

    Args:
        token:     Chord name, e.g. ``"D/F#"`` or ``"Am7"``.
        semitones: Signed shift, any integer.
        spelling:  Accidental policy, see :class:`Spelling`.
        target:    Destination key, only consulted for ``Spelling.KEY``.

    Returns:
        The transposed chord name.
    """
    flats = _use_flats(semitones, spelling, target)

    chord = parse_chord(token)
    if chord is not None:
        root = _shift(chord.root, semitones, flats)
        if root is None:
            return token
        if chord.bass is None:
            return root + chord.quality
        bass = _shift(chord.bass, semitones, flats)
        if bass is None:
            return token
        return f"{root}{chord.quality}/{bass}"

    parts = decompose_chord(token)
    if parts is None:
        return token
    root, suffix = parts
    new_root = _shift(root, semitones, flats)
    if new_root is None:
        return token
    return new_root + suffix


def interval_between(from_chord: str, to_chord: str) -> int:
    """Return the shortest signed shift in [-6, 6] from one chord root to another.

    Returns 0 when either root cannot be resolved.
    """
    from_parts = decompose_chord(from_chord)
    to_parts = decompose_chord(to_chord)
    if from_parts is None or to_parts is None:
        return 0

    from_index = index_of(from_parts[0])
    to_index = index_of(to_parts[0])
    if from_index is None or to_index is None:
        return 0

    semitones = to_index - from_index
    if semitones > 6:
        semitones -= 12
    if semitones < -6:
        semitones += 12
    return semitones
