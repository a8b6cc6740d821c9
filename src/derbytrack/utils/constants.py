"""Unit conversions and numerical tolerances used across the library."""

METERS_PER_FOOT: float = 0.3048
SMALL_EPS: float = 1e-9
BOUNDARY_TOLERANCE: float = 1e-6
DEFAULT_ARC_RESOLUTION: int = 128
