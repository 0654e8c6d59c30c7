"""Region export for the command line.

Regions are written either as WKT or as a standalone SVG document. SVG has
a y-down coordinate system, so the geometry is mirrored about the x axis.
"""

from pathlib import Path

import shapely
from shapely import affinity
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="{min_x} {min_y} {width} {height}">'
    "{body}</svg>\n"
)


def region_to_wkt(region: BaseGeometry, precision: int = 6) -> str:
    """Serialize a region to Well-Known Text."""
    return shapely.to_wkt(region, rounding_precision=precision)


def region_to_svg(region: BaseGeometry, fill: str = "#000000") -> str:
    """Render a region as an SVG document.

    Args:
        region: Polygonal shapely geometry
        fill: Fill colour of the shape

    Returns:
        SVG markup; an empty drawing for an empty region
    """
    if region.is_empty:
        return SVG_TEMPLATE.format(min_x=0, min_y=0, width=0, height=0, body="")

    flipped = affinity.scale(region, xfact=1.0, yfact=-1.0, origin=(0.0, 0.0))
    min_x, min_y, max_x, max_y = flipped.bounds
    width = max_x - min_x
    height = max_y - min_y
    stroke_scale = max(width, height) / 1000.0 or 1.0

    return SVG_TEMPLATE.format(
        min_x=min_x,
        min_y=min_y,
        width=width,
        height=height,
        body="".join(
            part.svg(scale_factor=stroke_scale, fill_color=fill, opacity=1.0)
            for part in _polygonal_parts(flipped)
        ),
    )


def _polygonal_parts(region: BaseGeometry) -> list[BaseGeometry]:
    if isinstance(region, (Polygon, MultiPolygon)):
        return [region]
    return [g for g in getattr(region, "geoms", []) if isinstance(g, (Polygon, MultiPolygon))]


def write_region(region: BaseGeometry, output_path: Path) -> None:
    """Write a region to a .svg or .wkt file, chosen by suffix.

    Raises:
        ValueError: If the suffix is not supported
    """
    suffix = output_path.suffix.lower()
    if suffix == ".svg":
        content = region_to_svg(region)
    elif suffix == ".wkt":
        content = region_to_wkt(region) + "\n"
    else:
        raise ValueError(f"Unsupported output format '{suffix}' (use .svg or .wkt)")

    output_path.write_text(content, encoding="utf-8")
