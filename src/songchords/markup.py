"""Shape of annotated content, the stored lyrics-and-chords markup.

Current format, written by :mod:`songchords.annotate`::

    <div>
    <pre data-key="C"><span class="c" title="">D</span>    <span class="c" title="">G</span>
    Bapa, Engkau Sungguh Baik</pre>
    </div>

Slash chords are split so each note can be addressed on its own::

    <span class="c" title="">D</span><span class="on" title="">/</span><span class="c" title="">F#</span>

Legacy content marks chords with an attribute instead of a class and
keeps the whole slash chord in one element::

    <strong style="color: rgb(59 130 246); font-weight: bold;" data-chord="true">D/F#</strong>

Readers must accept both.
"""

from bs4 import BeautifulSoup, Tag

CHORD_CLASS = "c"
SLASH_CLASS = "on"
LEGACY_CHORD_ATTR = "data-chord"

CHORD_SPAN = '<span class="c" title="">{chord}</span>'
SLASH_SPAN = '<span class="on" title="">/</span>'
CONTAINER = '<div>\n<pre data-key="{key}">{body}</pre>\n</div>'

# CSS selector matching chord elements of both formats plus the slash separator
CHORD_SELECTOR = 'span.c, span.on, [data-chord="true"]'

# Whitespace between legacy chord elements sits directly inside <p> and
# carries the chord column alignment.
PRESERVE_WHITESPACE_TAGS = {"pre", "textarea", "p", "div"}


def parse_markup(content: str) -> BeautifulSoup:
    """Parse stored content without collapsing whitespace-only text nodes."""
    return BeautifulSoup(content, "html.parser", preserve_whitespace_tags=PRESERVE_WHITESPACE_TAGS)


def is_chord_element(tag: Tag) -> bool:
    """Return True if *tag* holds chord text (or a slash separator)."""
    if tag.get(LEGACY_CHORD_ATTR) == "true":
        return True
    if tag.name != "span":
        return False
    classes = tag.get("class") or []
    return CHORD_CLASS in classes or SLASH_CLASS in classes
