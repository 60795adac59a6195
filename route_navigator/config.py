"""
Configuration for the Accessible Route Navigator.
Contains the constants shared by the catalog, the synthesizer and the engine.
"""

import logging

# Planar degree-to-meter conversion used for route distances.
# Only meaningful at city scale near the catalog's latitude.
METERS_PER_DEGREE = 111000

# Rating used when a point of interest has no entry for a profile
DEFAULT_RATING = 0.5

# Colour band thresholds (inclusive lower bounds)
ACCESSIBLE_THRESHOLD = 0.8
CAUTION_THRESHOLD = 0.5

# Route archetypes: fixed scores and durations (minutes)
ACCESSIBLE_ROUTE = {
    'name': 'Most Accessible Route',
    'score': 0.92,
    'duration_min': 18,
}

SCENIC_ROUTE = {
    'name': 'Scenic Route',
    'score': 0.68,
    'duration_min': 15,
}

DIRECT_ROUTE = {
    'name': 'Direct Historic Route',
    'score': 0.35,
    'duration_min': 12,
}

# Scenic path is modelled as longer than its straight segments
SCENIC_DISTANCE_FACTOR = 1.15

# Midpoint offsets (degrees)
ACCESSIBLE_LON_BIAS = 0.002
SCENIC_OFFSET = 0.001

# Logging
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# HTTP bridge
API_TITLE = "Accessible Route Navigator API"
API_VERSION = "1.0.0"


def configure_logging(level: str = LOG_LEVEL):
    """Apply the project log format to the root logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
