"""Unit tests for logging, constants and exception helpers."""

from __future__ import annotations

import logging
import unittest

from derbytrack.track import TrackGeometry
from derbytrack.track.models import TrackScale
from derbytrack.utils import METERS_PER_FOOT, configure_logging
from derbytrack.utils.exceptions import ConfigurationError, DerbyTrackError, TrackGeometryError


class UtilityTests(unittest.TestCase):
    """Coverage tests for logging and error helpers."""

    def test_logging_helper_runs(self) -> None:
        """Smoke-test logging helper configuration."""
        configure_logging(logging.INFO)
        logger = logging.getLogger("derbytrack_test")
        logger.info("logging configured")
        self.assertTrue(logging.getLogger().handlers)

    def test_resize_logs_rebuild_at_debug_level(self) -> None:
        """Emit a debug record from the geometry logger on resize."""
        geometry = TrackGeometry(351.0, 232.0)
        with self.assertLogs("derbytrack.track.geometry", level=logging.DEBUG) as captured:
            geometry.resize(702.0, 464.0)
        self.assertTrue(any("revision 1" in message for message in captured.output))

    def test_exceptions_share_base_class(self) -> None:
        """Derive configuration and geometry errors from the package error."""
        self.assertTrue(issubclass(ConfigurationError, DerbyTrackError))
        self.assertTrue(issubclass(TrackGeometryError, DerbyTrackError))
        self.assertFalse(issubclass(ConfigurationError, TrackGeometryError))

    def test_feet_conversion_uses_international_foot(self) -> None:
        """Convert 10 ft to 3.048 m before scaling to pixels."""
        self.assertEqual(METERS_PER_FOOT, 0.3048)
        self.assertAlmostEqual(TrackScale(2.0).feet_to_pixels(10.0), 6.096, delta=1e-12)


if __name__ == "__main__":
    unittest.main()
