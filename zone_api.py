# zone_api.py
from dataclasses import asdict
from typing import Any, Dict

from fastapi import Body, FastAPI, HTTPException

from config.app_logging import logger
from config.zone_config import ZONE_STYLES, get_severity_label
from src.zone_checker import evaluate_zones
from src.zone_models import ZoneReport, ZoneSnapshot
from utils.payload_parsing import PayloadError, parse_location, parse_scenario

api = FastAPI()


def format_report(report: ZoneReport) -> dict:
    return {
        "severity": report.severity.value,
        "message": get_severity_label(report.severity.value),
        "scenarios_loaded": report.scenarios_loaded,
        "descriptions": report.descriptions,
        "prohibited": report.prohibited_shapes,
        "restricted": report.restricted_shapes,
        "styles": ZONE_STYLES,
        "errors": [asdict(e) for e in report.errors],
    }


@api.post("/zones/check")
def check_zones(req: Dict[str, Any] = Body(...)):
    """
    Evaluate one snapshot.

    Body: {"location"?, "prohibited"?, "restricted"?} in the upstream
    camelCase shapes; absent or null keys mean not set / not loaded.
    """
    location = req.get("location")
    prohibited = req.get("prohibited")
    restricted = req.get("restricted")
    try:
        snapshot = ZoneSnapshot(
            location=parse_location(location) if location is not None else None,
            prohibited=parse_scenario(prohibited) if prohibited is not None else None,
            restricted=parse_scenario(restricted) if restricted is not None else None,
        )
    except PayloadError as e:
        logger.warning(f"Rejected zone check payload: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return format_report(evaluate_zones(snapshot))


@api.get("/healthz")
def healthz():
    return {"ok": True}
