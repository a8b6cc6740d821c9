"""Utility helpers."""

from derbytrack.utils.constants import METERS_PER_FOOT, SMALL_EPS
from derbytrack.utils.logging import configure_logging

__all__ = ["METERS_PER_FOOT", "SMALL_EPS", "configure_logging"]
