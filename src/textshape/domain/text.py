"""Text object and layout cursor."""

from dataclasses import dataclass
from enum import Enum


class Alignment(str, Enum):
    """Horizontal alignment of each line relative to x = 0."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    def shift(self, extent: float) -> float:
        """Horizontal shift for a line of the given extent.

        Left-aligned lines start at x = 0, right-aligned lines end at x = 0 and
        centered lines straddle it.
        """
        if self is Alignment.RIGHT:
            return -extent
        if self is Alignment.CENTER:
            return -extent / 2.0
        return 0.0


class Text:
    """A text string together with its horizontal alignment.

    The string is fixed at construction; the alignment may be changed.

    Example:
        text = Text("Hello\\nWorld")
        text.alignment = Alignment.LEFT
    """

    __slots__ = ("_text", "alignment")

    def __init__(self, text: str, alignment: Alignment = Alignment.CENTER) -> None:
        self._text = text
        self.alignment = alignment

    @property
    def text(self) -> str:
        """The text string."""
        return self._text

    def lines(self) -> list[str]:
        """Split the text at line breaks. An empty string is one empty line."""
        return self._text.split("\n")

    def __repr__(self) -> str:
        return f"Text({self._text!r}, alignment={self.alignment.value})"


@dataclass(frozen=True, slots=True)
class LayoutCursor:
    """Running (x, y) offset threaded through a layout pass."""

    x: float = 0.0
    y: float = 0.0

    def advance(self, dx: float) -> "LayoutCursor":
        """Move the cursor horizontally."""
        return LayoutCursor(self.x + dx, self.y)

    def next_line(self, line_height: float) -> "LayoutCursor":
        """Return to x = 0 one line further down."""
        return LayoutCursor(0.0, self.y - line_height)
