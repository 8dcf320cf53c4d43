import json
from pathlib import Path
from typing import Any, Dict, Optional

from config.app_logging import logger
from src.zone_models import Coordinate, Location, RoadRecord, Scenario


class PayloadError(ValueError):
    """A scenario or location payload misses a key or has the wrong type."""


def _require(payload: Dict[str, Any], key: str, kind, where: str) -> Any:
    if not isinstance(payload, dict):
        raise PayloadError(f"{where} must be an object")
    value = payload.get(key)
    # bool is an int subclass, never a valid coordinate
    if not isinstance(value, kind) or isinstance(value, bool):
        name = kind.__name__ if isinstance(kind, type) else "number"
        raise PayloadError(f"{where}.{key} must be a {name}")
    return value


def parse_position(payload: Dict[str, Any], where: str = "position") -> Coordinate:
    """{latitude, longitude} -> (lon, lat)."""
    lat = _require(payload, "latitude", (int, float), where)
    lon = _require(payload, "longitude", (int, float), where)
    return (float(lon), float(lat))


def parse_location(payload: Dict[str, Any]) -> Location:
    """
    Build a Location from a geocoding-style payload.

    Only ``referencePosition`` and ``roadAccessPosition`` are read; address,
    quality and the rest of the geocoding result are ignored.
    """
    reference = parse_position(
        _require(payload, "referencePosition", dict, "location"),
        "location.referencePosition",
    )
    road_access = None
    if payload.get("roadAccessPosition") is not None:
        road_access = parse_position(
            _require(payload, "roadAccessPosition", dict, "location"),
            "location.roadAccessPosition",
        )
    return Location(reference_position=reference, road_access_position=road_access)


def parse_scenario(payload: Dict[str, Any]) -> Scenario:
    scenario_id = _require(payload, "id", str, "scenario")
    roads = _require(payload, "roadsToBeAttributed", list, "scenario")

    records = []
    for i, road in enumerate(roads):
        where = f"scenario.roadsToBeAttributed[{i}]"
        records.append(
            RoadRecord(
                description=_require(road, "description", str, where),
                points=_require(road, "points", str, where),
            )
        )
    return Scenario(id=scenario_id, roads_to_be_attributed=tuple(records))


def load_scenario_file(path: Path) -> Optional[Scenario]:
    """Load a scenario JSON file. A missing file means the tier is not loaded."""
    path = Path(path)
    if not path.exists():
        logger.warning(f"Scenario file {path} not found, tier left unloaded.")
        return None

    with path.open() as f:
        payload = json.load(f)

    scenario = parse_scenario(payload)
    logger.info(f"Loaded scenario {scenario.id} with {len(scenario.roads_to_be_attributed)} roads from {path}.")
    return scenario
