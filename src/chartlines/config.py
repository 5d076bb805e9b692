"""Classifier configuration: the chord grammar and the common-word exceptions.

Both tables are tuned for Portuguese/English charts.  Other languages need a
different word list (and sometimes a different grammar), so they live in a
:class:`ClassifierConfig` rather than inside the classifier.

Config files are JSON objects; every key is optional::

    {
        "chord_pattern": "[A-H](?:#|b)?(?:m|maj|dim|sus)?\\\\d*",
        "common_words": ["A", "E", "O"],
        "extra_common_words": ["LA", "LE"]
    }

``chord_pattern`` is matched against the whole cleaned token, so anchors are
optional.  ``common_words`` replaces the default word list;
``extra_common_words`` is added on top of whichever list is in effect.
"""

import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# Root, accidental, quality, extension, altered extension, slash bass.
CHORD_PATTERN = (
    r"^[A-G](?:#|b)?"
    r"(?:m|maj|min|dim|aug|sus|add)?"
    r"(?:2|4|5|6|7|9|11|13)?"
    r"(?:[#b](?:5|9|11|13))?"
    r"(?:\/[A-G](?:#|b)?)?$"
)

# Short words that fit the grammar but are far more likely to be lyrics.
COMMON_WORDS = frozenset(
    ["A", "E", "O", "DA", "DE", "DO", "EM", "UM", "ME", "SE", "NA", "NO", "EU"]
)


@dataclass(frozen=True)
class ClassifierConfig:
    """Swappable heuristics used by :func:`~chartlines.classifier.classify`."""

    chord_pattern: re.Pattern = field(default_factory=lambda: re.compile(CHORD_PATTERN))
    common_words: frozenset[str] = COMMON_WORDS

    @classmethod
    def from_mapping(cls, data: Mapping, source: str = "<mapping>") -> "ClassifierConfig":
        """Build a config from a parsed JSON object, falling back to defaults."""
        pattern_text = data.get("chord_pattern", CHORD_PATTERN)
        if not isinstance(pattern_text, str) or not pattern_text:
            raise ConfigError(source, "'chord_pattern' must be a non-empty string")
        try:
            pattern = re.compile(pattern_text)
        except re.error as exc:
            raise ConfigError(source, f"'chord_pattern' does not compile: {exc}") from exc

        words = set(_word_list(data, "common_words", source, default=COMMON_WORDS))
        words.update(_word_list(data, "extra_common_words", source, default=()))

        return cls(chord_pattern=pattern, common_words=frozenset(words))


DEFAULT_CONFIG = ClassifierConfig()


def load_config(path: str | Path) -> ClassifierConfig:
    """Read a JSON config file and return the resulting :class:`ClassifierConfig`.

    Raises :class:`~chartlines.exceptions.ConfigError` on any problem with the
    file: unreadable, malformed JSON, wrong shape, or a pattern that does not
    compile.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(str(path), f"cannot read file ({exc.strerror})") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(str(path), f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(raw, Mapping):
        raise ConfigError(str(path), "top level must be a JSON object")

    config = ClassifierConfig.from_mapping(raw, source=str(path))
    logger.debug(
        "Loaded classifier config from %s (%d common words)", path, len(config.common_words)
    )
    return config


def _word_list(data: Mapping, key: str, source: str, default: Iterable[str]) -> list[str]:
    value = data.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(w, str) for w in value):
        raise ConfigError(source, f"'{key}' must be a list of strings")
    return value
