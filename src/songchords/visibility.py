"""Lyrics-only display: hide the chords of annotated content."""

from bs4 import NavigableString

from .markup import CHORD_SELECTOR, is_chord_element, parse_markup

# Leftovers of chord notation that are not inside a chord element, e.g. the
# "/" between two legacy chord elements.
STRAY_FRAGMENTS = {"/", "#", "b", "/#", "/b"}


def _inside_chord(node: NavigableString) -> bool:
    return any(is_chord_element(parent) for parent in node.parents if parent.name)


def hide_chords(content: str) -> str:
    """Return *content* with chord elements set to ``display: none``.

    Text nodes outside chord elements that consist only of a stray chord
    fragment (see :data:`STRAY_FRAGMENTS`) are removed.
    """
    if not content or not content.strip():
        return ""

    soup = parse_markup(content)

    for element in soup.select(CHORD_SELECTOR):
        style = (element.get("style") or "").strip().rstrip(";").strip()
        element["style"] = f"{style}; display: none" if style else "display: none"

    for node in soup.find_all(string=True):
        if node.strip() in STRAY_FRAGMENTS and not _inside_chord(node):
            node.extract()

    return str(soup)
