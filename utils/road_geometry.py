# road_geometry.py
from typing import Sequence

from shapely.geometry import LineString, Point, Polygon

from config.zone_config import COORDINATE_PRECISION
from src.zone_models import Coordinate, RoadShape, ShapeKind


class MalformedGeometryError(ValueError):
    """A road record decoded to an empty coordinate sequence."""


def classify_shape(coords: Sequence[Coordinate]) -> RoadShape:
    """
    Decide the primitive of a decoded road from its length.

    1 coordinate is a point, 2 a path (single segment), 3+ a ring.
    """
    if not coords:
        raise MalformedGeometryError("Road geometry has no coordinates")
    if len(coords) == 1:
        kind = ShapeKind.POINT
    elif len(coords) == 2:
        kind = ShapeKind.PATH
    else:
        kind = ShapeKind.RING
    return RoadShape(kind=kind, coordinates=tuple(coords))


def ring_geometry(coords: Sequence[Coordinate]) -> Polygon:
    """Polygon closed by re-appending the first coordinate."""
    return Polygon([*coords, coords[0]])


def _same_position(a: Coordinate, b: Coordinate) -> bool:
    fmt = f"{{:.{COORDINATE_PRECISION}f}}"
    return fmt.format(a[0]) == fmt.format(b[0]) and fmt.format(a[1]) == fmt.format(b[1])


def shape_contains(road: RoadShape, point: Coordinate) -> bool:
    if road.kind is ShapeKind.POINT:
        return _same_position(road.coordinates[0], point)

    p = Point(point)  # NOTE: (x=lon, y=lat)
    if road.kind is ShapeKind.PATH:
        # endpoints included
        return LineString(road.coordinates).covers(p)

    poly = ring_geometry(road.coordinates)
    # boundary counts as inside
    return poly.contains(p) or poly.touches(p)


def is_contained(road_coords: Sequence[Coordinate], point: Coordinate) -> bool:
    return shape_contains(classify_shape(road_coords), point)
