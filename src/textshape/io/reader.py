"""Font reader providing glyph indices, metrics and outlines.

This module provides the FontReader class, the fontTools-backed glyph source
used by the layout engine.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from textshape.config import CurveConfig
from textshape.domain.glyph import GlyphOutline
from textshape.exceptions import FontLoadError, GlyphLoadError
from textshape.io.converter import cff_glyph_to_contours, glyf_glyph_to_contours


class FontReader:
    """Loads TTF/OTF fonts and answers layout queries.

    Glyphs are addressed by their index in the font's glyph order. Characters
    missing from the cmap map to glyph 0 (.notdef).

    Example:
        with FontReader(Path("font.ttf")) as reader:
            index = reader.glyph_index("A")
            outline = reader.load_outline(index)
    """

    def __init__(self, font_path: Path, curve: CurveConfig | None = None) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            curve: Curve settings (used for the CFF conversion tolerance)
        """
        self._font_path = font_path
        self._curve = curve or CurveConfig()
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}
        self._kern_pairs: dict[tuple[str, str], float] = {}

    @classmethod
    def from_ttfont(
        cls,
        font: TTFont,
        curve: CurveConfig | None = None,
        font_path: Path | None = None,
    ) -> "FontReader":
        """Wrap an already opened TTFont, e.g. one built in memory."""
        reader = cls(font_path or Path("<memory>"), curve)
        reader._attach(font)
        return reader

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._attach(TTFont(str(self._font_path)))

    def _attach(self, font: TTFont) -> None:
        self._font = font
        self._cmap = font.getBestCmap() or {}
        self._kern_pairs = _read_kern_pairs(font)

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF-flavoured fonts, 'TrueType' otherwise."""
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return len(self._require_font().getGlyphOrder())

    def glyph_index(self, char: str) -> int:
        """Map a character to its glyph index (0 if unmapped)."""
        font = self._require_font()
        name = self._cmap.get(ord(char))
        if name is None:
            return 0
        return font.getGlyphID(name)

    def glyph_name(self, glyph_index: int) -> str:
        """Map a glyph index to its name."""
        return self._require_font().getGlyphName(glyph_index)

    def advance_width(self, glyph_index: int) -> float:
        """Horizontal advance of a glyph in font units."""
        font = self._require_font()
        advance, _lsb = font["hmtx"][self.glyph_name(glyph_index)]
        return float(advance)

    def advance_height(self) -> float:
        """Vertical line advance in font units.

        Measured on the line-break glyph: its vmtx advance when the font has
        vertical metrics, else OS/2 typographic ascender minus descender, else
        the em size. A source that yields zero or less falls through to the
        next one.
        """
        font = self._require_font()
        name = self.glyph_name(self.glyph_index("\n"))
        if "vmtx" in font:
            advance, _tsb = font["vmtx"][name]
            if advance > 0:
                return float(advance)
        if "OS/2" in font:
            os2 = font["OS/2"]
            typo_height = os2.sTypoAscender - os2.sTypoDescender
            if typo_height > 0:
                return float(typo_height)
        return float(self.units_per_em)

    def kerning(self, previous: int | None, current: int) -> float:
        """Kerning adjustment between two glyphs from the legacy kern table."""
        if previous is None or not self._kern_pairs:
            return 0.0
        pair = (self.glyph_name(previous), self.glyph_name(current))
        return self._kern_pairs.get(pair, 0.0)

    def load_outline(self, glyph_index: int) -> GlyphOutline:
        """Load a glyph's contours.

        Raises:
            GlyphLoadError: If the glyph does not exist or its outline data
                cannot be decoded
        """
        font = self._require_font()
        if not 0 <= glyph_index < self.glyph_count:
            raise GlyphLoadError(str(glyph_index), "glyph index out of range")

        name = self.glyph_name(glyph_index)
        try:
            if "glyf" in font:
                glyf_table = font["glyf"]
                contours = glyf_glyph_to_contours(glyf_table[name], glyf_table)
            elif "CFF " in font or "CFF2" in font:
                max_err = self._curve.get_flatten_tolerance(self.units_per_em)
                contours = cff_glyph_to_contours(name, font, max_err)
            else:
                raise GlyphLoadError(name, "font has no glyf or CFF outlines")
        except GlyphLoadError:
            raise
        except Exception as e:
            raise GlyphLoadError(name, str(e)) from e

        return GlyphOutline(
            index=glyph_index,
            name=name,
            contours=contours,
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        if self._font is None:
            self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def _is_horizontal_kerning(table: object) -> bool:
    """True for subtables holding plain horizontal kerning values.

    OpenType coverage: bit 0 horizontal, bit 1 minimum values, bit 2
    cross-stream, bit 3 override. Apple coverage: 0x80 vertical, 0x40
    cross-stream, 0x20 variation.
    """
    coverage = getattr(table, "coverage", 1)
    if getattr(table, "apple", False):
        return not coverage & 0xE0
    return coverage & ~0x08 == 0x01


def _read_kern_pairs(font: TTFont) -> dict[tuple[str, str], float]:
    """Collect horizontal format 0 pairs from the kern table.

    Vertical, cross-stream and minimum-value subtables are ignored. When
    several subtables define the same pair the first one wins.
    """
    if "kern" not in font:
        return {}

    pairs: dict[tuple[str, str], float] = {}
    for table in font["kern"].kernTables:
        if getattr(table, "format", None) != 0 or not _is_horizontal_kerning(table):
            continue
        for pair, value in table.kernTable.items():
            pairs.setdefault(pair, float(value))
    return pairs


def load_font(font_path: Path | str, curve: CurveConfig | None = None) -> FontReader:
    """Open a font file for text conversion.

    Args:
        font_path: Path to a TTF or OTF font
        curve: Curve settings

    Returns:
        A loaded FontReader; close it (or use it as a context manager) when done

    Raises:
        FontLoadError: If the file is missing or is not a readable font
    """
    path = Path(font_path)
    reader = FontReader(path, curve)
    try:
        reader.load()
    except Exception as e:
        raise FontLoadError(str(path), str(e)) from e
    return reader
