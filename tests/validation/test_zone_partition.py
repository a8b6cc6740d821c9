"""Validation that the four zones partition the skating surface."""

from __future__ import annotations

import unittest

import numpy as np

from derbytrack.track import Zone, classify_zone
from derbytrack.track.models import ZONE_ORDER, Point
from tests.helpers import CANVAS_HEIGHT, CANVAS_WIDTH, standard_snapshot

EDGE_MARGIN = 1.0


def _polygon_area(vertices: np.ndarray) -> float:
    """Area enclosed by a closed polyline.

    Args:
        vertices: ``(n, 2)`` vertex array; the last vertex connects to the first.

    Returns:
        Absolute shoelace area [px^2].
    """
    x = vertices[:, 0]
    y = vertices[:, 1]
    return 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


class ZonePartitionTests(unittest.TestCase):
    """Check zone coverage and disjointness on a sampling grid."""

    @classmethod
    def setUpClass(cls) -> None:
        """Build the standard snapshot once for all tests."""
        cls.snapshot = standard_snapshot()
        cls.boundaries = cls.snapshot.boundaries

    def _near_any_edge(self, point: Point) -> bool:
        """Check whether a point is too close to a boundary or zone edge.

        Args:
            point: Query point.

        Returns:
            ``True`` within ``EDGE_MARGIN`` of any boundary or zone curve.
        """
        curves = [self.boundaries.inner, self.boundaries.outer]
        curves.extend(self.boundaries.zone_curve(zone) for zone in ZONE_ORDER)
        return any(curve.distance_to(point) < EDGE_MARGIN for curve in curves)

    def test_every_surface_point_has_exactly_one_zone(self) -> None:
        """Assign surface points to one zone and everything else to outside."""
        surface = self.boundaries.track_surface
        checked = 0
        for x in np.linspace(3.3, CANVAS_WIDTH - 3.1, 71):
            for y in np.linspace(2.7, CANVAS_HEIGHT - 2.9, 47):
                point = Point(float(x), float(y))
                if self._near_any_edge(point):
                    continue
                containing = [zone for zone in ZONE_ORDER if self.boundaries.zone_curve(zone).contains(point)]
                zone = classify_zone(self.boundaries, point)
                if surface.contains(point):
                    self.assertEqual(len(containing), 1, msg=repr(point))
                    self.assertEqual(zone, containing[0])
                    checked += 1
                else:
                    self.assertEqual(containing, [], msg=repr(point))
                    self.assertEqual(zone, Zone.OUTSIDE)
        self.assertGreater(checked, 200)

    def test_zone_areas_sum_to_surface_area(self) -> None:
        """Match the summed zone areas with the area between the boundaries."""
        surface_area = _polygon_area(self.boundaries.outer.vertices) - _polygon_area(
            self.boundaries.inner.vertices
        )
        zone_area = sum(_polygon_area(self.boundaries.zone_curve(zone).vertices) for zone in ZONE_ORDER)

        self.assertGreater(surface_area, 0.0)
        self.assertAlmostEqual(zone_area / surface_area, 1.0, delta=1e-3)


if __name__ == "__main__":
    unittest.main()
