"""Renderers for classified chart lines.

Each renderer turns the output of :func:`~chartlines.classifier.classify`
into text for one medium.

Line kind → presentation
------------------------

+-----------+------------------------------+-------------------------------------+
| Kind      | ``text``                     | ``html``                            |
+===========+==============================+=====================================+
| CHORDS    | bold yellow, whitespace kept | ``line--chords``, ``white-space:    |
|           |                              | pre``                               |
+-----------+------------------------------+-------------------------------------+
| LYRICS    | plain, whitespace kept       | ``line--lyrics``, ``white-space:    |
|           |                              | pre``                               |
+-----------+------------------------------+-------------------------------------+
| HEADER    | bold, upper-cased            | ``line--header``                    |
+-----------+------------------------------+-------------------------------------+
| EMPTY     | blank row                    | ``line--empty`` (spacer)            |
+-----------+------------------------------+-------------------------------------+

``json`` emits the records themselves: ``[{"id", "kind", "content"}, ...]``.

Usage::

    from chartlines.render import get_renderer
    renderer = get_renderer("html", mode="controller")
    page = renderer.render(classify(text))
"""

import html
import json

import click

from .exceptions import UnsupportedFormatError
from .models import ClassifiedLine, LineKind

HTML_MODES = ("viewer", "controller")


class TextRenderer:
    """Render lines for a terminal, styled with ANSI escapes via click."""

    def __init__(self, color: bool = True):
        self.color = color

    def render(self, lines: list[ClassifiedLine]) -> str:
        if not lines:
            return ""
        return "\n".join(self._render_line(line) for line in lines) + "\n"

    def _render_line(self, line: ClassifiedLine) -> str:
        if line.kind == LineKind.EMPTY:
            return ""
        if line.kind == LineKind.HEADER:
            return self._style(line.content.upper(), bold=True)
        if line.kind == LineKind.CHORDS:
            return self._style(line.content, fg="yellow", bold=True)
        return line.content

    def _style(self, text: str, **styles) -> str:
        if not self.color:
            return text
        return click.style(text, **styles)


class HtmlRenderer:
    """Render lines as an HTML fragment, one ``<div>`` per line."""

    def __init__(self, mode: str = "viewer"):
        if mode not in HTML_MODES:
            raise ValueError(f"mode must be one of {', '.join(HTML_MODES)}, got {mode!r}")
        self.mode = mode

    def render(self, lines: list[ClassifiedLine]) -> str:
        if not lines:
            return ""
        parts = [f'<div class="chart chart--{self.mode}">']
        parts.extend(f"  {_html_line(line)}" for line in lines)
        parts.append("</div>")
        return "\n".join(parts) + "\n"


class JsonRenderer:
    """Render lines as a JSON array of ``{"id", "kind", "content"}`` records."""

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def render(self, lines: list[ClassifiedLine]) -> str:
        records = [line.to_dict() for line in lines]
        return json.dumps(records, indent=self.indent, ensure_ascii=False) + "\n"


_RENDERERS = {
    "text": TextRenderer,
    "html": HtmlRenderer,
    "json": JsonRenderer,
}

FORMATS = tuple(_RENDERERS)


def get_renderer(name: str, **options):
    """Return an instantiated renderer for the format *name*.

    Raises UnsupportedFormatError if no renderer is registered under *name*.
    """
    try:
        cls = _RENDERERS[name]
    except KeyError:
        raise UnsupportedFormatError(name) from None
    return cls(**options)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _html_line(line: ClassifiedLine) -> str:
    css = f"line line--{line.kind.value}"
    if line.kind == LineKind.EMPTY:
        return f'<div id="{line.id}" class="{css}"></div>'
    if line.kind == LineKind.HEADER:
        return f'<div id="{line.id}" class="{css}">{html.escape(line.content)}</div>'
    # Chord and lyric rows: keep the spacing that aligns chords to syllables
    return (
        f'<div id="{line.id}" class="{css}" style="white-space: pre">'
        f"{html.escape(line.content)}</div>"
    )
