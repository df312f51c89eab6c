"""Strip annotated content back to the plain text it was built from.

Used when a stored song is opened for editing: the editor works on plain
text and re-annotates on save.
"""

from .markup import CHORD_SELECTOR, parse_markup


def to_plain_text(markup: str) -> str:
    """Return the plain text of annotated content.

    Chord elements of both formats are replaced by their text and ``<br>``
    becomes a newline. The text of the ``<pre>`` block is returned when there
    is one; otherwise all text, with paragraphs on separate lines. Malformed
    markup is read as far as the HTML parser gets; this never raises.
    """
    if not markup or not markup.strip():
        return ""

    soup = parse_markup(markup)

    for element in soup.select(CHORD_SELECTOR):
        element.replace_with(element.get_text())

    for br in soup.find_all("br"):
        br.replace_with("\n")

    pre = soup.find("pre")
    if pre is not None:
        text = pre.get_text()
    else:
        # Rich-text editor output: one <p> per line
        for p in soup.find_all("p"):
            p.insert_after("\n")
        text = soup.get_text().rstrip("\n")

    return text.replace("\xa0", " ")
