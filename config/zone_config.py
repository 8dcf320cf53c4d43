# zone_config.py

# Point records match when lon/lat agree to this many fractional digits (~0.11 m)
COORDINATE_PRECISION = 6

# Only records with more than this many comma-separated tokens are drawn as polygons
MIN_POLYGON_TOKENS = 6

# Severity tiers (from the motorized access scenarios)
SEVERITY_LABELS = {
    "prohibited": "Prohibited motorized access",
    "restricted": "Restricted motorized access",
    "none": "No restrictions",
}

# Fill styles for the renderer, one per tier
ZONE_STYLES = {
    "prohibited": {
        "fill-color": "#d32f2f",
        "fill-opacity": 0.3,
        "fill-outline-color": "#d32f2f",
    },
    "restricted": {
        "fill-color": "#1976d2",
        "fill-opacity": 0.3,
        "fill-outline-color": "#1976d2",
    },
}

def get_severity_label(severity: str) -> str:
    """Return the human readable message for a severity value."""
    return SEVERITY_LABELS.get(severity, SEVERITY_LABELS["none"])
