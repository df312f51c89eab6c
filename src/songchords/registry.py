from .classifiers.base import LineClassifier
from .classifiers.bracketed import BracketedClassifier
from .classifiers.heuristic import HeuristicClassifier
from .config import Settings
from .exceptions import UnknownClassifierError

_CLASSIFIERS: dict[str, type[LineClassifier]] = {
    HeuristicClassifier.name: HeuristicClassifier,
    BracketedClassifier.name: BracketedClassifier,
}


def available_classifiers() -> list[str]:
    return list(_CLASSIFIERS)


def get_classifier(name: str, **options) -> LineClassifier:
    """Return an instantiated line classifier registered under *name*.

    Raises UnknownClassifierError if no classifier matches.
    """
    try:
        cls = _CLASSIFIERS[name]
    except KeyError:
        raise UnknownClassifierError(name) from None
    return cls(**options)


def classifier_from_settings(settings: Settings, name: str | None = None) -> LineClassifier:
    """Build a classifier configured from the ``[parser]`` settings.

    *name* overrides the configured classifier; its options still come from
    the settings.
    """
    name = name or settings.get("parser", "classifier")
    if name == HeuristicClassifier.name:
        return get_classifier(name, max_words=settings.get("parser", "max_chord_line_words"))
    return get_classifier(name)
