#!/usr/bin/env python3
# main.py
"""
CLI tool to check locations against the road attribute scenarios.
"""

import sys

from config.app_logging import logger
from config.config import PROHIBITED_SCENARIO_PATH, RESTRICTED_SCENARIO_PATH
from config.zone_config import get_severity_label
from src.zone_checker import ZoneSession
from src.zone_models import Location, Severity, ZoneReport
from utils.payload_parsing import load_scenario_file

SEVERITY_ICONS = {
    Severity.PROHIBITED: "⛔",
    Severity.RESTRICTED: "⚠️",
    Severity.NONE: "✅",
}


def format_report_output(report: ZoneReport, label: str):
    """Pretty print a zone report."""
    print("\n" + "="*80)
    print(f"ZONE CHECK FOR: {label}")
    print("="*80 + "\n")

    print(f"{SEVERITY_ICONS[report.severity]} {get_severity_label(report.severity.value)}")
    if not report.scenarios_loaded:
        print("   (no scenario loaded yet, defaulting to prohibited)")

    if report.descriptions:
        print("   Matching roads:")
        for description in report.descriptions:
            print(f"   📍 {description}")
    else:
        print("   No road attribute zone matched this location.")

    for error in report.errors:
        print(f"   ❌ Skipped road {error.index} of {error.scenario_id}: {error.error}")

    for name, shapes in (("prohibited", report.prohibited_shapes), ("restricted", report.restricted_shapes)):
        if shapes is not None:
            print(f"   🗺️  {name} shapes drawn: {len(shapes['features'])}")
    print()


def load_session() -> ZoneSession:
    print("\n🔄 Loading scenarios...")
    session = ZoneSession()
    # one broken tier must not keep the other from loading
    for name, path, setter in (
        ("prohibited", PROHIBITED_SCENARIO_PATH, session.set_prohibited),
        ("restricted", RESTRICTED_SCENARIO_PATH, session.set_restricted),
    ):
        try:
            setter(load_scenario_file(path))
        except ValueError as e:
            logger.error(f"Could not load {name} scenario from {path}: {e}")
            print(f"❌ Error loading {name} scenario: {e}")
            print("⚠️  Proceeding with whatever was loaded...\n")
    loaded = [s.id for s in (session.snapshot.prohibited, session.snapshot.restricted) if s is not None]
    print(f"✅ Loaded {len(loaded)} scenario(s): {', '.join(loaded) or 'none'}\n")
    return session


def test_example_locations():
    """Check a few Paris locations against the configured scenarios."""

    examples = [
        {
            "label": "Place de la Concorde",
            "location": Location(reference_position=(2.3215, 48.8656)),
        },
        {
            "label": "Rue de Rivoli (Concorde perimeter, outside the square)",
            "location": Location(reference_position=(2.3255, 48.8630)),
        },
        {
            "label": "Louvre pyramid",
            "location": Location(reference_position=(2.3376, 48.8606)),
        },
        {
            "label": "Champ de Mars, road access on Avenue Anatole France",
            "location": Location(
                reference_position=(2.2970, 48.8550),
                road_access_position=(2.2960, 48.8575),
            ),
        },
        {
            "label": "Gare de Lyon",
            "location": Location(reference_position=(2.3735, 48.8443)),
        },
    ]

    session = load_session()

    for example in examples:
        print("\n" + "━"*80)
        print(f"Testing: {example['label']}")
        print(f"Reference position: {example['location'].reference_position}")
        if example["location"].road_access_position:
            print(f"Road access position: {example['location'].road_access_position}")
        print("━"*80)

        try:
            report = session.set_location(example["location"])
            format_report_output(report, example["label"])
        except ValueError as e:
            print(f"\n❌ Error processing location: {e}\n")
            import traceback
            traceback.print_exc()


def _read_float(prompt: str):
    value = input(prompt).strip()
    if not value:
        return None
    return float(value)


def test_single_location():
    """Interactive mode - check a single location."""
    print("\n" + "="*80)
    print("SINGLE LOCATION TESTING MODE")
    print("="*80 + "\n")

    try:
        lat = _read_float("Latitude: ")
        lon = _read_float("Longitude: ")
        access_lat = _read_float("Road access latitude (optional): ")
        access_lon = _read_float("Road access longitude (optional): ")
    except ValueError:
        print("❌ Coordinates must be numbers")
        return

    if lat is None or lon is None:
        print("❌ Latitude and longitude required")
        return

    road_access = None
    if access_lat is not None and access_lon is not None:
        road_access = (access_lon, access_lat)
    location = Location(reference_position=(lon, lat), road_access_position=road_access)

    session = load_session()
    try:
        report = session.set_location(location)
        format_report_output(report, f"{lat}, {lon}")
    except ValueError as e:
        logger.exception(e)
        print(f"\n❌ Error: {e}\n")


if __name__ == "__main__":
    print("\n" + "🚀 "+"="*76)
    print("   ROAD ATTRIBUTE ZONE CHECKER")
    print("="*78 + " 🚀\n")

    if len(sys.argv) > 1 and sys.argv[1] == "--single":
        test_single_location()
    else:
        print("Checking example locations...\n")
        test_example_locations()

        print("\n" + "="*80)
        print("💡 To check a custom location, run: python main.py --single")
        print("="*80 + "\n")
