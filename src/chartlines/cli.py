import logging
import sys
from pathlib import Path

import click

from .classifier import LineClassifier
from .config import load_config
from .exceptions import ConfigError, FetchError, ParseError, UnsupportedSourceError
from .registry import get_source
from .render import FORMATS, HTML_MODES, get_renderer

logger = logging.getLogger(__name__)


def _renderer_options(fmt: str, color: bool, mode: str) -> dict:
    if fmt == "text":
        return {"color": color}
    if fmt == "html":
        return {"mode": mode}
    return {}


@click.command()
@click.argument("source")
@click.option("-f", "--format", "fmt", type=click.Choice(FORMATS), default="text",
              show_default=True, help="Output format.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
@click.option("-c", "--config", "config_path", default=None, metavar="PATH",
              help="JSON file with a custom chord pattern and common-word list.")
@click.option("--no-color", is_flag=True, default=False,
              help="Disable ANSI styling in text output.")
@click.option("--mode", type=click.Choice(HTML_MODES), default="viewer",
              show_default=True, help="Theme class for HTML output.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr.")
def main(
    source: str,
    fmt: str,
    output_path: str | None,
    config_path: str | None,
    no_color: bool,
    mode: str,
    verbose: bool,
) -> None:
    """Classify the lines of a chord chart and render them.

    SOURCE is a file path, "-" for stdin, or an http(s) URL of a page that
    keeps its chart in <pre> blocks.

    \b
    Line kinds:
      - chords   chord rows (C  G  Am  F)
      - lyrics   everything else
      - header   [Chorus], Intro:
      - empty    blank lines
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # --- Resolve config + source ---
    try:
        config = load_config(config_path) if config_path else None
        chart_source = get_source(source)
    except (ConfigError, UnsupportedSourceError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Fetch + extract ---
    try:
        text = chart_source.load(source)
    except FetchError as exc:
        msg = f"Error: {exc}"
        if exc.status_code == 403:
            msg += " (the site blocks automated requests; save the page and pass the file)"
        click.echo(msg, err=True)
        sys.exit(1)
    except ParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Classify + render ---
    lines = LineClassifier(config).classify(text)
    logger.debug("Classified %d line(s) from %s", len(lines), source)

    color = not no_color and output_path is None
    renderer = get_renderer(fmt, **_renderer_options(fmt, color, mode))
    rendered = renderer.render(lines)

    # --- Output ---
    if output_path is None:
        click.echo(rendered, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(rendered, encoding="utf-8")
    click.echo(f"Written to {dest}")
