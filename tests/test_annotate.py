import pytest

from songchords.annotate import (
    ChordAnnotator,
    annotate,
    get_default_annotator,
    mark_chords,
    reset_default_annotator,
)
from songchords.cache import BoundedCache
from songchords.config import CONFIG_ENV_VAR, Settings
from songchords.exceptions import CacheError


class _RefusingCache(BoundedCache):
    def put(self, key, value):
        raise CacheError("storage full")


@pytest.fixture
def isolated_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_default_annotator()
    yield
    reset_default_annotator()


# ---------------------------------------------------------------------------
# mark_chords
# ---------------------------------------------------------------------------


def test_mark_single_chord():
    assert mark_chords("G") == '<span class="c" title="">G</span>'


def test_mark_slash_chord_splits_bass():
    assert mark_chords("D/F#") == (
        '<span class="c" title="">D</span>'
        '<span class="on" title="">/</span>'
        '<span class="c" title="">F#</span>'
    )


def test_mark_keeps_sharp_inside_span():
    assert mark_chords("C#m") == '<span class="c" title="">C#m</span>'


def test_mark_leaves_words_alone():
    assert mark_chords("Dad sang Bapa") == "Dad sang Bapa"


def test_mark_preserves_spacing():
    assert mark_chords("G   Em") == (
        '<span class="c" title="">G</span>   <span class="c" title="">Em</span>'
    )


def test_mark_escapes_text():
    assert mark_chords("Tom & Jerry <3") == "Tom &amp; Jerry &lt;3"


# ---------------------------------------------------------------------------
# ChordAnnotator.annotate
# ---------------------------------------------------------------------------


def test_annotate_wraps_container():
    assert ChordAnnotator().annotate("G\nHello") == (
        '<div>\n<pre data-key="C"><span class="c" title="">G</span>\nHello</pre>\n</div>'
    )


def test_annotate_custom_key():
    assert '<pre data-key="D">' in ChordAnnotator(key="D").annotate("G")


def test_annotate_empty_input():
    assert ChordAnnotator().annotate("") == ""
    assert ChordAnnotator().annotate("  \n ") == ""


def test_annotate_caches_result():
    annotator = ChordAnnotator()
    result = annotator.annotate("G\nHello")
    assert annotator.cache.get("G\nHello") == result


def test_annotate_returns_cached_value():
    cache = BoundedCache()
    cache.put("G", "cached")
    assert ChordAnnotator(cache=cache).annotate("G") == "cached"


def test_annotate_skips_cache_for_long_input():
    annotator = ChordAnnotator(max_cacheable_length=10)
    annotator.annotate("G " * 5)
    assert len(annotator.cache) == 0
    annotator.annotate("G " * 4)
    assert len(annotator.cache) == 1


def test_annotate_cache_bound():
    annotator = ChordAnnotator()
    for i in range(150):
        annotator.annotate(f"G line {i}")
    assert len(annotator.cache) == 100
    assert annotator.cache.keys() == [f"G line {i}" for i in range(50, 150)]


def test_annotate_survives_cache_failure():
    result = ChordAnnotator(cache=_RefusingCache()).annotate("G")
    assert '<span class="c" title="">G</span>' in result


def test_from_settings():
    settings = Settings({"annotator": {"cache_capacity": 5, "default_key": "E"}})
    annotator = ChordAnnotator.from_settings(settings)
    assert annotator.cache.capacity == 5
    assert annotator.key == "E"
    assert annotator.max_cacheable_length == 10_000


# ---------------------------------------------------------------------------
# Process-wide annotator
# ---------------------------------------------------------------------------


def test_module_annotate_uses_default_annotator(isolated_default):
    result = annotate("G")
    assert '<span class="c" title="">G</span>' in result
    assert "G" in get_default_annotator().cache


def test_reset_default_annotator(isolated_default):
    first = get_default_annotator()
    reset_default_annotator()
    assert get_default_annotator() is not first
