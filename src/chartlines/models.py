from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    CHORDS = "chords"  # chord row: C    G    Am   F
    LYRICS = "lyrics"  # everything that is not clearly chords
    EMPTY = "empty"  # blank or whitespace only
    HEADER = "header"  # section label: [Chorus], Intro:


@dataclass(frozen=True)
class ClassifiedLine:
    """A single line of a chart, labelled by kind.

    ``content`` is ``""`` for EMPTY lines and the trimmed text for HEADER
    lines.  CHORDS and LYRICS lines keep the original text verbatim so that
    chords stay aligned over their lyrics in a fixed-width font.
    """

    index: int
    kind: LineKind
    content: str

    @property
    def id(self) -> str:
        return f"line-{self.index}"

    def to_dict(self) -> dict:
        return {"id": self.id, "kind": self.kind.value, "content": self.content}
