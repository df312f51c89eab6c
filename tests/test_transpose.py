from pathlib import Path

from songchords.annotate import ChordAnnotator
from songchords.pitch import Spelling
from songchords.transpose import transpose_content

FIXTURES = Path(__file__).parent / "fixtures"


def _annotated(text: str) -> str:
    return ChordAnnotator().annotate(text)


def _span(chord: str) -> str:
    return f'<span class="c" title="">{chord}</span>'


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


def test_same_key_returns_content_unchanged():
    content = _annotated("G  D/F#\nHello")
    assert transpose_content(content, "G", "G") == content


def test_enharmonic_keys_return_content_unchanged():
    content = _annotated("C#  F#\nHello")
    assert transpose_content(content, "C#", "Db") is content


def test_unknown_key_is_no_op():
    content = _annotated("G\nHello")
    assert transpose_content(content, "H", "G") == content


def test_empty_content():
    assert transpose_content("", "C", "D") == ""


# ---------------------------------------------------------------------------
# Modern span format
# ---------------------------------------------------------------------------


def test_transpose_spans_and_data_key():
    content = _annotated("C  G\nHello")
    assert transpose_content(content, "C", "D") == (
        f'<div>\n<pre data-key="D">{_span("D")}  {_span("A")}\nHello</pre>\n</div>'
    )


def test_already_transposed_chords_are_not_shifted_again():
    # C -> D and D -> E must not chain into C -> E
    content = _annotated("C D\nla")
    result = transpose_content(content, "C", "D")
    assert f"{_span('D')} {_span('E')}" in result


def test_slash_chord_spans_transposed_independently():
    content = _annotated("D/F#\nla")
    result = transpose_content(content, "D", "E")
    assert _span("E") + '<span class="on" title="">/</span>' + _span("G#") in result


def test_text_outside_spans_untouched():
    content = f'<div>\n<pre data-key="C">Chorus: {_span("C")} sing Am I</pre>\n</div>'
    result = transpose_content(content, "C", "D")
    assert result == f'<div>\n<pre data-key="D">Chorus: {_span("D")} sing Am I</pre>\n</div>'


def test_negative_interval_spells_flats():
    result = transpose_content(_annotated("E  A\nla"), "C", "A")
    assert _span("Db") in result
    assert _span("Gb") in result


def test_key_spelling():
    content = _annotated("C  F\nla")
    assert _span("A#") in transpose_content(content, "C", "F")
    assert _span("Bb") in transpose_content(content, "C", "F", spelling=Spelling.KEY)


def test_unparseable_span_left_alone():
    content = '<pre data-key="C"><span class="c">X7</span> <span class="c">G</span></pre>'
    result = transpose_content(content, "C", "D")
    assert '<span class="c">X7</span>' in result
    assert '<span class="c">A</span>' in result


def test_span_whitespace_preserved():
    content = '<span class="c"> G </span>'
    assert transpose_content(content, "C", "D") == '<span class="c"> A </span>'


def test_supplied_chords_do_not_change_span_rewrite():
    content = _annotated("G\nla")
    assert transpose_content(content, "G", "A", chords=["G", "Em"]) == transpose_content(
        content, "G", "A"
    )


# ---------------------------------------------------------------------------
# Legacy attribute format
# ---------------------------------------------------------------------------


def test_legacy_chord_elements():
    content = (FIXTURES / "legacy-tiptap.html").read_text(encoding="utf-8")
    result = transpose_content(content, "D", "E")
    assert 'data-chord="true">E</strong>' in result
    assert 'data-chord="true">A</strong>' in result
    assert 'data-chord="true">G#m</strong>' in result
    assert 'data-chord="true">E/G#</strong>' in result
    assert "Bapa, Engkau Sungguh Baik" in result


def test_legacy_styles_untouched():
    content = '<p><strong style="color: red;" data-chord="true">G</strong></p>'
    assert transpose_content(content, "G", "A") == (
        '<p><strong style="color: red;" data-chord="true">A</strong></p>'
    )


# ---------------------------------------------------------------------------
# Content without chord elements
# ---------------------------------------------------------------------------


def test_whole_word_rewrite_with_known_chords():
    content = "<p>C   G</p><p>Cantik</p>"
    result = transpose_content(content, "C", "D", chords=["C", "G"])
    assert result == "<p>D   A</p><p>Cantik</p>"


def test_whole_word_rewrite_distinguishes_a_and_am():
    result = transpose_content("<p>A Am</p>", "A", "B", chords=["A", "Am"])
    assert result == "<p>B Bm</p>"


def test_whole_word_rewrite_single_pass():
    result = transpose_content("<p>C D</p>", "C", "D", chords=["C", "D"])
    assert result == "<p>D E</p>"


def test_whole_word_rewrite_skips_tags():
    content = '<pre data-key="C">C G</pre>'
    assert transpose_content(content, "C", "D", chords=["C", "G"]) == '<pre data-key="D">D A</pre>'


def test_no_elements_and_no_chords_only_updates_key():
    content = '<pre data-key="C">C G</pre>'
    assert transpose_content(content, "C", "D") == '<pre data-key="D">C G</pre>'
