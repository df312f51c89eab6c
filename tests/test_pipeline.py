from pathlib import Path

import pytest

from songchords.annotate import ChordAnnotator, reset_default_annotator
from songchords.config import CONFIG_ENV_VAR
from songchords.models import Song
from songchords.pipeline import build_song, edit_text, render_song
from songchords.pitch import Spelling

FIXTURE = Path(__file__).parent / "fixtures" / "bapa-engkau-baik.txt"


def _span(chord: str) -> str:
    return f'<span class="c" title="">{chord}</span>'


@pytest.fixture
def sheet() -> str:
    return FIXTURE.read_text(encoding="utf-8")


@pytest.fixture
def song(sheet) -> Song:
    return build_song("Bapa Engkau Baik", "Unknown", sheet, base_chord="D", annotator=ChordAnnotator())


# ---------------------------------------------------------------------------
# build_song / edit_text
# ---------------------------------------------------------------------------


def test_build_song_fields(song):
    assert song.title == "Bapa Engkau Baik"
    assert song.artist == "Unknown"
    assert song.base_chord == "D"
    assert song.chords == "A,Bm,D,E,F#m,G"
    assert song.lyrics_and_chords.startswith('<div>\n<pre data-key="C">')


def test_build_song_empty_base_chord_defaults_to_c(sheet):
    song = build_song("T", "A", sheet, base_chord="", annotator=ChordAnnotator())
    assert song.base_chord == "C"


def test_build_song_with_default_annotator(sheet, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_default_annotator()
    try:
        song = build_song("T", "A", sheet)
    finally:
        reset_default_annotator()
    assert _span("F#m") in song.lyrics_and_chords


def test_edit_text_round_trip(song, sheet):
    assert edit_text(song) == sheet


# ---------------------------------------------------------------------------
# render_song
# ---------------------------------------------------------------------------


def test_render_in_base_key_is_stored_content(song):
    assert render_song(song) == song.lyrics_and_chords
    assert render_song(song, key="D") == song.lyrics_and_chords


def test_render_transposed(song):
    html = render_song(song, key="E")
    assert _span("G#m") in html
    assert _span("F#m") not in html
    assert _span("C#m") in html
    assert '<pre data-key="E">' in html
    assert "Bapa, Engkau Sungguh Baik" in html


def test_render_down_uses_flats(song):
    html = render_song(song, key="C")
    assert _span("Em") in html
    assert _span("Am") in html
    assert _span("Bb") not in html


def test_render_key_spelling(song):
    assert _span("Bb") in render_song(song, key="F", spelling=Spelling.KEY)


def test_render_without_chords(song):
    html = render_song(song, show_chords=False)
    assert "display: none" in html
    assert html.count("display: none") == song.lyrics_and_chords.count('class="c"')


def test_render_missing_base_chord_defaults_to_c():
    song = Song(
        title="T",
        artist="A",
        base_chord="",
        lyrics_and_chords=ChordAnnotator().annotate("C  G\nla"),
        chords="C,G",
    )
    html = render_song(song, key="D")
    assert _span("D") in html
    assert _span("A") in html
