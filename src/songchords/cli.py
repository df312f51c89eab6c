import json
import logging
import sys
from pathlib import Path

import click

from .annotate import ChordAnnotator
from .config import Settings
from .exceptions import SongChordsError
from .normalize import to_plain_text
from .parser import parse_lyrics_and_chords
from .pitch import Spelling, interval_between
from .registry import available_classifiers, classifier_from_settings
from .transpose import transpose_content
from .visibility import hide_chords

_input_arg = click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
_output_opt = click.option(
    "-o", "--output", "output_path", default=None, metavar="PATH",
    help="Write to PATH instead of stdout.",
)


def _fail(exc: Exception) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def _emit(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text)
        return
    dest = Path(output_path)
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}")


def _split_chords(value: str | None) -> list[str]:
    if not value:
        return []
    return [c.strip() for c in value.split(",") if c.strip()]


@click.group()
@click.option("--config", "config_path", default=None, metavar="PATH",
              help="Settings file (default: $SONGCHORDS_CONFIG or ./songchords.toml).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Parse, annotate and transpose chord sheets.

    \b
    Commands read INPUT (a file, or stdin when omitted) and print the result.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        ctx.obj = Settings.load(config_path)
    except SongChordsError as exc:
        _fail(exc)


@main.command()
@_input_arg
@_output_opt
@click.option("--classifier", "classifier_name", type=click.Choice(available_classifiers()),
              default=None, help="Chord line detection (default from settings).")
@click.pass_obj
def parse(settings: Settings, source, output_path: str | None, classifier_name: str | None) -> None:
    """Split a chord sheet into lyrics and a chord list (JSON)."""
    try:
        classifier = classifier_from_settings(settings, classifier_name)
    except SongChordsError as exc:
        _fail(exc)

    parsed = parse_lyrics_and_chords(source.read(), classifier)
    payload = {"raw_input": parsed.raw_input, "lyrics": parsed.lyrics, "chords": parsed.chords}
    _emit(json.dumps(payload, ensure_ascii=False, indent=2), output_path)


@main.command()
@_input_arg
@_output_opt
@click.option("--key", default=None, help="Value of the data-key attribute (default from settings).")
@click.pass_obj
def annotate(settings: Settings, source, output_path: str | None, key: str | None) -> None:
    """Wrap the chords of plain text in storage markup."""
    annotator = ChordAnnotator.from_settings(settings)
    if key:
        annotator.key = key
    _emit(annotator.annotate(source.read()), output_path)


@main.command()
@_input_arg
@_output_opt
def plain(source, output_path: str | None) -> None:
    """Strip annotated content back to plain text."""
    _emit(to_plain_text(source.read()), output_path)


@main.command()
@_input_arg
@_output_opt
@click.option("--from", "from_chord", required=True, help="Key the content is written in.")
@click.option("--to", "to_chord", required=True, help="Key to transpose to.")
@click.option("--chords", default=None, help="Comma-separated chords known to occur in the content.")
@click.option("--spelling", type=click.Choice([s.value for s in Spelling]), default=None,
              help="sign: sharps up / flats down; key: follow the target key.")
@click.pass_obj
def transpose(
    settings: Settings,
    source,
    output_path: str | None,
    from_chord: str,
    to_chord: str,
    chords: str | None,
    spelling: str | None,
) -> None:
    """Transpose the chords of annotated content."""
    policy = Spelling(spelling or settings.get("transpose", "spelling"))
    result = transpose_content(
        source.read(), from_chord, to_chord, chords=_split_chords(chords), spelling=policy
    )
    _emit(result, output_path)


@main.command()
@_input_arg
@_output_opt
def hide(source, output_path: str | None) -> None:
    """Hide the chords of annotated content (lyrics-only view)."""
    _emit(hide_chords(source.read()), output_path)


@main.command()
@click.argument("from_chord")
@click.argument("to_chord")
def interval(from_chord: str, to_chord: str) -> None:
    """Print the shortest signed interval in semitones between two chord roots."""
    click.echo(str(interval_between(from_chord, to_chord)))
