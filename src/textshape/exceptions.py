"""Exception hierarchy for textshape."""


class TextShapeError(Exception):
    """Base exception for all textshape errors."""

    pass


class FontError(TextShapeError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(TextShapeError):
    """Errors related to glyph outlines."""

    pass


class GlyphLoadError(GlyphError):
    """The font could not produce outline data for a glyph.

    Raised for corrupt glyph tables or unsupported outline formats. Any
    occurrence aborts the whole text conversion.
    """

    def __init__(self, glyph: str, reason: str) -> None:
        self.glyph = glyph
        self.reason = reason
        super().__init__(f"Failed to load glyph '{glyph}': {reason}")
