"""Line classifier for chord charts.

Labels every line of a chart as CHORDS, LYRICS, EMPTY or HEADER so that a
renderer can style them apart (chords in a monospace row above the lyrics,
headers as labels, blank lines as spacing).

Each line is classified on its own:

  1. blank or whitespace only              → EMPTY  (content ``""``)
  2. ``[Label]`` or anything ending in ``:`` → HEADER (content trimmed)
  3. mostly chord tokens                   → CHORDS (content verbatim)
  4. everything else                       → LYRICS (content verbatim)

Step 3 splits the line into whitespace-separated tokens and strips each one
down to letters, digits, ``#`` and ``/``.  A cleaned token counts as a chord
when it fully matches the chord grammar and is not one of the common words
(``A``, ``E``, ``DE``, ...); any other non-empty cleaned token counts against.
The line is CHORDS when chords outnumber the rest, or when there is at least
one chord and nothing else.

Example::

    [Verse]          → HEADER  "[Verse]"
    C       G        → CHORDS  "C       G"
    Hello there      → LYRICS  "Hello there"
                     → EMPTY   ""
    Am F             → CHORDS  "Am F"
"""

import re

from .config import DEFAULT_CONFIG, ClassifierConfig
from .models import ClassifiedLine, LineKind

# Everything a chord symbol cannot contain.
_NON_CHORD_CHARS_RE = re.compile(r"[^a-zA-Z0-9#/]")

# Leading/trailing whitespace, counting the byte-order mark as whitespace.
_EDGE_SPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------


def clean_token(token: str) -> str:
    """Strip punctuation from a token, keeping ASCII letters, digits, ``#`` and ``/``."""
    return _NON_CHORD_CHARS_RE.sub("", token)


def is_chord_token(cleaned: str, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    """Return True if *cleaned* is a chord symbol and not a common word."""
    if cleaned in config.common_words:
        return False
    return config.chord_pattern.fullmatch(cleaned) is not None


def count_tokens(text: str, config: ClassifierConfig = DEFAULT_CONFIG) -> tuple[int, int]:
    """Return ``(chord_count, non_chord_count)`` for the tokens of *text*.

    Tokens that clean down to nothing (pure punctuation) count for neither.
    """
    chords = 0
    others = 0
    for token in text.split():
        cleaned = clean_token(token)
        if is_chord_token(cleaned, config):
            chords += 1
        elif cleaned:
            others += 1
    return chords, others


def _is_header(trimmed: str) -> bool:
    # "Well I said:" also matches; that is accepted as heuristic noise.
    return (trimmed.startswith("[") and trimmed.endswith("]")) or trimmed.endswith(":")


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify_line(
    line: str, index: int, config: ClassifierConfig = DEFAULT_CONFIG
) -> ClassifiedLine:
    """Classify a single chart line found at position *index*."""
    trimmed = _EDGE_SPACE_RE.sub("", line)
    if not trimmed:
        return ClassifiedLine(index=index, kind=LineKind.EMPTY, content="")

    if _is_header(trimmed):
        return ClassifiedLine(index=index, kind=LineKind.HEADER, content=trimmed)

    chords, others = count_tokens(trimmed, config)
    is_chord_line = chords > others or (chords > 0 and others == 0)
    kind = LineKind.CHORDS if is_chord_line else LineKind.LYRICS
    # Untrimmed: leading spaces position chords over their syllables.
    return ClassifiedLine(index=index, kind=kind, content=line)


def classify(text: str, config: ClassifierConfig | None = None) -> list[ClassifiedLine]:
    """Classify every line of *text*.

    The result has one entry per ``"\\n"``-separated segment, in input order;
    a trailing newline therefore yields a trailing EMPTY line.  An empty
    string yields an empty list.
    """
    if not text:
        return []
    config = config or DEFAULT_CONFIG
    return [classify_line(line, i, config) for i, line in enumerate(text.split("\n"))]


class LineClassifier:
    """A :func:`classify` bound to one configuration."""

    def __init__(self, config: ClassifierConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def classify(self, text: str) -> list[ClassifiedLine]:
        return classify(text, self.config)

    __call__ = classify
