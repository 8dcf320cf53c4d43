# zone_models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

# (longitude, latitude), GeoJSON order
Coordinate = Tuple[float, float]


class Severity(str, Enum):
    PROHIBITED = "prohibited"
    RESTRICTED = "restricted"
    NONE = "none"


class ShapeKind(str, Enum):
    POINT = "point"
    PATH = "path"
    RING = "ring"


@dataclass(frozen=True)
class RoadShape:
    kind: ShapeKind
    coordinates: Tuple[Coordinate, ...]


@dataclass(frozen=True)
class RoadRecord:
    description: str
    points: str


@dataclass(frozen=True)
class Scenario:
    id: str
    roads_to_be_attributed: Tuple[RoadRecord, ...] = ()


@dataclass(frozen=True)
class Location:
    reference_position: Coordinate
    road_access_position: Optional[Coordinate] = None


@dataclass(frozen=True)
class ZoneSnapshot:
    location: Optional[Location] = None
    prohibited: Optional[Scenario] = None
    restricted: Optional[Scenario] = None


@dataclass(frozen=True)
class RecordError:
    """A road record that could not be decoded and was left out."""

    scenario_id: str
    index: int
    description: str
    error: str


@dataclass(frozen=True)
class ZoneReport:
    prohibited_shapes: Optional[Dict]
    restricted_shapes: Optional[Dict]
    descriptions: List[str]
    severity: Severity
    scenarios_loaded: bool
    errors: List[RecordError] = field(default_factory=list)
