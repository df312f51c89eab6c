"""Song-level operations used by the songbook's editor and viewer.

Editing::

    song = build_song("Bapa Engkau Baik", "Unknown", editor_text, base_chord="D")
    text = edit_text(song)          # back to plain text for the editor

Viewing::

    html = render_song(song, key="E", show_chords=False)
"""

import logging

from .annotate import ChordAnnotator, get_default_annotator
from .classifiers.base import LineClassifier
from .models import DEFAULT_BASE_CHORD, Song
from .normalize import to_plain_text
from .parser import parse_lyrics_and_chords
from .pitch import Spelling
from .transpose import transpose_content
from .visibility import hide_chords

logger = logging.getLogger(__name__)


def build_song(
    title: str,
    artist: str,
    editor_text: str,
    base_chord: str = DEFAULT_BASE_CHORD,
    annotator: ChordAnnotator | None = None,
    classifier: LineClassifier | None = None,
) -> Song:
    """Build a :class:`~songchords.models.Song` record from plain editor text.

    The chord list comes from parsing the text; the stored content comes from
    annotating it.
    """
    parsed = parse_lyrics_and_chords(editor_text, classifier)
    annotator = annotator or get_default_annotator()
    song = Song(
        title=title,
        artist=artist,
        base_chord=base_chord or DEFAULT_BASE_CHORD,
        lyrics_and_chords=annotator.annotate(editor_text),
    )
    return song.with_chords(parsed.chords)


def edit_text(song: Song) -> str:
    """Return the song's stored content as plain text for the editor."""
    return to_plain_text(song.lyrics_and_chords)


def render_song(
    song: Song,
    key: str | None = None,
    show_chords: bool = True,
    spelling: Spelling = Spelling.SIGN,
) -> str:
    """Return the song's content in *key* (default: its base chord).

    With ``show_chords=False`` the chords are hidden for a lyrics-only view.
    """
    base = song.base_chord or DEFAULT_BASE_CHORD
    target = key or base
    logger.debug(f"Rendering {song.title!r} in {target} (base {base})")

    content = transpose_content(
        song.lyrics_and_chords, base, target, chords=song.chord_list(), spelling=spelling
    )
    if not show_chords:
        content = hide_chords(content)
    return content
