# zone_checker.py
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from shapely.geometry import mapping

from config.app_logging import logger
from config.zone_config import MIN_POLYGON_TOKENS
from src.zone_models import (
    Coordinate, Location, RecordError, RoadRecord, RoadShape, Scenario,
    Severity, ZoneReport, ZoneSnapshot,
)
from utils.points_decoding import ParseError, count_tokens, decode_points
from utils.road_geometry import (
    MalformedGeometryError, classify_shape, ring_geometry, shape_contains,
)

DecodedRoad = Tuple[RoadRecord, RoadShape]


def effective_point(location: Location) -> Coordinate:
    """Road access position when the geocoder gave one, reference position otherwise."""
    if location.road_access_position is not None:
        return location.road_access_position
    return location.reference_position


def decode_scenario(scenario: Optional[Scenario], errors: Optional[List[RecordError]] = None) -> List[DecodedRoad]:
    """
    Decode and classify every road of a scenario.

    Roads that fail to decode are left out and appended to ``errors``; the
    remaining roads of the scenario are still returned.
    """
    if scenario is None:
        return []

    decoded = []
    for i, road in enumerate(scenario.roads_to_be_attributed):
        try:
            decoded.append((road, classify_shape(decode_points(road.points))))
        except (ParseError, MalformedGeometryError) as e:
            logger.warning(f"Skipping road {i} ({road.description!r}) of scenario {scenario.id}: {e}")
            if errors is not None:
                errors.append(RecordError(
                    scenario_id=scenario.id,
                    index=i,
                    description=road.description,
                    error=str(e),
                ))
    return decoded


def location_in_road(road: RoadRecord, location: Optional[Location]) -> bool:
    """Check whether the location's effective point lies in the given road."""
    if location is None:
        return False
    return shape_contains(classify_shape(decode_points(road.points)), effective_point(location))


def _collection(scenario_id: str, decoded: List[DecodedRoad], has_location: bool) -> Dict:
    features = []
    if has_location:
        for road, shape in decoded:
            # points and segments are only drawn through the containment popup
            if count_tokens(road.points) <= MIN_POLYGON_TOKENS:
                continue
            features.append({
                "type": "Feature",
                "properties": {"description": road.description},
                "geometry": mapping(ring_geometry(shape.coordinates)),
            })
    return {"type": "FeatureCollection", "id": scenario_id, "features": features}


def build_shape_collection(scenario: Optional[Scenario], has_location: bool,
                           errors: Optional[List[RecordError]] = None) -> Optional[Dict]:
    """
    GeoJSON feature collection of the scenario's polygon roads.

    Stays empty until a location has been picked. Returns None while the
    scenario itself is not loaded.
    """
    if scenario is None:
        return None
    return _collection(scenario.id, decode_scenario(scenario, errors), has_location)


def _any_contains(decoded: List[DecodedRoad], point: Coordinate) -> bool:
    return any(shape_contains(shape, point) for _, shape in decoded)


def _matching(decoded: List[DecodedRoad], point: Coordinate) -> List[str]:
    return [road.description for road, shape in decoded if shape_contains(shape, point)]


def _severity(point: Optional[Coordinate], prohibited: List[DecodedRoad], restricted: List[DecodedRoad],
              scenarios_loaded: bool) -> Severity:
    # prohibited roads always win, whatever order the restricted ones come in
    if point is not None and _any_contains(prohibited, point):
        return Severity.PROHIBITED
    if point is not None and _any_contains(restricted, point):
        return Severity.RESTRICTED
    if not scenarios_loaded:
        # nothing loaded yet: assume the worst
        return Severity.PROHIBITED
    return Severity.NONE


def matching_descriptions(point: Coordinate, prohibited: Optional[Scenario], restricted: Optional[Scenario],
                          errors: Optional[List[RecordError]] = None) -> List[str]:
    """Descriptions of every road containing the point, prohibited roads first."""
    decoded = decode_scenario(prohibited, errors) + decode_scenario(restricted, errors)
    return _matching(decoded, point)


def classify_severity(point: Optional[Coordinate], prohibited: Optional[Scenario], restricted: Optional[Scenario],
                      errors: Optional[List[RecordError]] = None) -> Severity:
    scenarios_loaded = prohibited is not None or restricted is not None
    return _severity(
        point,
        decode_scenario(prohibited, errors),
        decode_scenario(restricted, errors),
        scenarios_loaded,
    )


def evaluate_zones(snapshot: ZoneSnapshot) -> ZoneReport:
    """
    Main zone engine.

    Args:
        snapshot: location and both scenarios, any of them may be None

    Returns:
        ZoneReport with one shape collection per loaded scenario, the
        descriptions of the roads containing the effective point and the
        overall severity
    """
    errors: List[RecordError] = []

    # 1. Decode every road once for this snapshot
    prohibited = decode_scenario(snapshot.prohibited, errors)
    restricted = decode_scenario(snapshot.restricted, errors)
    scenarios_loaded = snapshot.prohibited is not None or snapshot.restricted is not None

    # 2. Shapes to draw
    has_location = snapshot.location is not None
    prohibited_shapes = None
    if snapshot.prohibited is not None:
        prohibited_shapes = _collection(snapshot.prohibited.id, prohibited, has_location)
    restricted_shapes = None
    if snapshot.restricted is not None:
        restricted_shapes = _collection(snapshot.restricted.id, restricted, has_location)

    # 3. Roads containing the point
    point = effective_point(snapshot.location) if has_location else None
    descriptions = _matching(prohibited + restricted, point) if point is not None else []

    # 4. Severity, independent of the description list
    severity = _severity(point, prohibited, restricted, scenarios_loaded)

    logger.info(
        f"Evaluated point {point}: severity={severity.value}, "
        f"{len(descriptions)} matching road(s), {len(errors)} skipped road(s)."
    )
    return ZoneReport(
        prohibited_shapes=prohibited_shapes,
        restricted_shapes=restricted_shapes,
        descriptions=descriptions,
        severity=severity,
        scenarios_loaded=scenarios_loaded,
        errors=errors,
    )


class ZoneSession:
    """
    Holds the latest (location, prohibited, restricted) snapshot.

    Every setter replaces one input wholesale and returns a freshly computed
    report; nothing is kept between snapshots besides the inputs.
    """

    def __init__(self, snapshot: Optional[ZoneSnapshot] = None):
        self.snapshot = snapshot or ZoneSnapshot()

    def set_location(self, location: Optional[Location]) -> ZoneReport:
        self.snapshot = replace(self.snapshot, location=location)
        return self.refresh()

    def set_prohibited(self, scenario: Optional[Scenario]) -> ZoneReport:
        self.snapshot = replace(self.snapshot, prohibited=scenario)
        return self.refresh()

    def set_restricted(self, scenario: Optional[Scenario]) -> ZoneReport:
        self.snapshot = replace(self.snapshot, restricted=scenario)
        return self.refresh()

    def refresh(self) -> ZoneReport:
        return evaluate_zones(self.snapshot)
