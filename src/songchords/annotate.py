"""Wrap chord tokens in plain text with markup for storage.

Every chord found in the text becomes its own ``<span class="c">`` so later
passes (transposing, hiding chords) can address it; everything else is
copied through with only ``&``, ``<`` and ``>`` escaped. See
:mod:`songchords.markup` for the resulting format.

The editor re-annotates on every (debounced) keystroke, so results are kept
in a :class:`~songchords.cache.BoundedCache` keyed by the exact input text.
"""

import html
import logging

from .cache import BoundedCache
from .config import Settings
from .exceptions import CacheError
from .grammar import CHORD_SCAN_RE
from .markup import CHORD_SPAN, CONTAINER, SLASH_SPAN

logger = logging.getLogger(__name__)

DEFAULT_KEY = "C"
DEFAULT_MAX_CACHEABLE_LENGTH = 10_000


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _chord_markup(token: str) -> str:
    if "/" in token:
        main, bass = token.split("/", 1)
        return CHORD_SPAN.format(chord=main) + SLASH_SPAN + CHORD_SPAN.format(chord=bass)
    return CHORD_SPAN.format(chord=token)


def mark_chords(text: str) -> str:
    """Return *text* with every chord token wrapped in a chord span (no container)."""
    parts: list[str] = []
    last = 0
    for m in CHORD_SCAN_RE.finditer(text):
        parts.append(_escape(text[last : m.start()]))
        parts.append(_chord_markup(m.group()))
        last = m.end()
    parts.append(_escape(text[last:]))
    return "".join(parts)


class ChordAnnotator:
    """Turn plain lyrics-and-chords text into annotated content."""

    def __init__(
        self,
        cache: BoundedCache | None = None,
        key: str = DEFAULT_KEY,
        max_cacheable_length: int = DEFAULT_MAX_CACHEABLE_LENGTH,
    ):
        self.cache = cache if cache is not None else BoundedCache()
        self.key = key
        self.max_cacheable_length = max_cacheable_length

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChordAnnotator":
        return cls(
            cache=BoundedCache(settings.get("annotator", "cache_capacity")),
            key=settings.get("annotator", "default_key"),
            max_cacheable_length=settings.get("annotator", "max_cacheable_length"),
        )

    def annotate(self, text: str) -> str:
        """Return annotated content for *text*; whitespace-only input gives ``""``."""
        if not text or not text.strip():
            return ""

        cached = self.cache.get(text)
        if cached is not None:
            return cached

        result = CONTAINER.format(key=html.escape(self.key), body=mark_chords(text))

        if len(text) < self.max_cacheable_length:
            try:
                self.cache.put(text, result)
            except CacheError as exc:
                logger.warning(f"Could not cache annotation ({len(text)} chars): {exc}")
        else:
            logger.debug(f"Not caching annotation of {len(text)} chars")

        return result


_default_annotator: ChordAnnotator | None = None


def get_default_annotator() -> ChordAnnotator:
    """Return the process-wide annotator, building it from settings on first use."""
    global _default_annotator
    if _default_annotator is None:
        _default_annotator = ChordAnnotator.from_settings(Settings.load())
    return _default_annotator


def reset_default_annotator() -> None:
    """Drop the process-wide annotator (and its cache)."""
    global _default_annotator
    _default_annotator = None


def annotate(text: str) -> str:
    """Annotate *text* with the process-wide :class:`ChordAnnotator`."""
    return get_default_annotator().annotate(text)
