import pytest

from src.zone_models import ShapeKind
from utils.points_decoding import decode_points
from utils.road_geometry import (
    MalformedGeometryError, classify_shape, is_contained, ring_geometry,
)

UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def test_classify_by_length():
    assert classify_shape([(2.35, 48.85)]).kind is ShapeKind.POINT
    assert classify_shape(decode_points("48.85,2.35,48.86,2.36")).kind is ShapeKind.PATH
    assert classify_shape(UNIT_SQUARE[:3]).kind is ShapeKind.RING
    assert classify_shape(UNIT_SQUARE).kind is ShapeKind.RING


def test_classify_empty_sequence_is_malformed():
    with pytest.raises(MalformedGeometryError):
        classify_shape([])
    with pytest.raises(MalformedGeometryError):
        is_contained([], (0.0, 0.0))


def test_point_is_contained_in_itself():
    p = (2.3376, 48.8606)
    assert is_contained([p], p)


def test_point_matches_up_to_six_decimals():
    p = (2.35, 48.85)
    assert is_contained([p], (2.35 + 1e-8, 48.85 - 1e-8))
    assert not is_contained([p], (2.35 + 1e-6, 48.85))
    assert not is_contained([p], (2.35, 48.85 + 6e-7))


def test_path_contains_points_on_segment_including_endpoints():
    segment = [(0.0, 0.0), (2.0, 2.0)]
    assert is_contained(segment, (1.0, 1.0))
    assert is_contained(segment, (0.5, 0.5))
    assert is_contained(segment, (0.0, 0.0))
    assert is_contained(segment, (2.0, 2.0))


def test_path_excludes_points_off_segment():
    segment = [(0.0, 0.0), (2.0, 2.0)]
    assert not is_contained(segment, (1.0, 1.5))
    # collinear but past the end
    assert not is_contained(segment, (3.0, 3.0))


def test_ring_inside_and_outside():
    assert is_contained(UNIT_SQUARE, (0.5, 0.5))
    assert not is_contained(UNIT_SQUARE, (1.5, 0.5))
    assert not is_contained(UNIT_SQUARE, (-0.1, 0.5))


def test_ring_boundary_is_inclusive():
    assert is_contained(UNIT_SQUARE, (1.0, 0.5))
    assert is_contained(UNIT_SQUARE, (0.5, 0.0))
    assert is_contained(UNIT_SQUARE, (0.0, 0.0))


def test_ring_triangle_from_three_coordinates():
    triangle = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]
    assert is_contained(triangle, (1.0, 1.0))
    assert not is_contained(triangle, (3.0, 3.0))


def test_ring_geometry_is_closed_explicitly():
    poly = ring_geometry(UNIT_SQUARE)
    coords = list(poly.exterior.coords)
    assert coords[0] == coords[-1] == (0.0, 0.0)
    assert len(coords) == len(UNIT_SQUARE) + 1
