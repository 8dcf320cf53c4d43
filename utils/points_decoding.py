"""Decode the flat ``lat,lon,lat,lon,...`` strings carried by road records."""

import math
import re
from typing import List

from src.zone_models import Coordinate


class ParseError(ValueError):
    """A token of an encoded points string is not a finite number."""

    def __init__(self, token: str, raw: str = ""):
        self.token = token
        self.raw = raw
        super().__init__(f"Invalid coordinate token {token!r}")


def count_tokens(raw: str) -> int:
    """Number of comma-separated tokens in an encoded points string."""
    return len(raw.split(","))


# ASCII sign, digits, optional fraction and exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_token(token: str, raw: str) -> float:
    if not DECIMAL_PATTERN.fullmatch(token.strip()):
        raise ParseError(token, raw)
    value = float(token)
    # overflow such as "1e999"
    if not math.isfinite(value):
        raise ParseError(token, raw)
    return value


def decode_points(raw: str) -> List[Coordinate]:
    """
    Decode an encoded points string into (lon, lat) coordinates.

    The string interleaves latitude then longitude for every pair. A dangling
    last token is dropped. Any non-numeric token fails the whole decode.

    Example:
        >>> decode_points("48.85,2.35,48.86,2.36")
        [(2.35, 48.85), (2.36, 48.86)]
    """
    # parse everything first so a bad token never yields a partial result
    values = [_parse_token(token, raw) for token in raw.split(",")]

    coordinates = []
    for i in range(0, len(values) - 1, 2):
        lat, lon = values[i], values[i + 1]
        coordinates.append((lon, lat))
    return coordinates
