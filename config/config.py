# config.py
import os
from pathlib import Path

SCENARIO_DIR = Path(__file__).resolve().parent / "scenarios"

# Scenario files, one per severity tier
PROHIBITED_SCENARIO_PATH = Path(
    os.getenv("PROHIBITED_SCENARIO_PATH", str(SCENARIO_DIR / "prohibited.json"))
)
RESTRICTED_SCENARIO_PATH = Path(
    os.getenv("RESTRICTED_SCENARIO_PATH", str(SCENARIO_DIR / "restricted.json"))
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
