"""Unit tests for boundary projection."""

from __future__ import annotations

import math
import unittest

from derbytrack.track import project_to_boundaries
from derbytrack.track.models import Point
from derbytrack.track.projection import is_turn_regime
from tests.helpers import standard_snapshot


class BoundaryProjectionTests(unittest.TestCase):
    """Validate straight and turn projections onto both boundaries."""

    @classmethod
    def setUpClass(cls) -> None:
        """Build the standard reference points once for all tests."""
        cls.points = standard_snapshot().points

    def test_top_straight_keeps_x_and_evaluates_boundary_lines(self) -> None:
        """Project vertically onto the inner and outer top lines."""
        p = self.points
        projection = project_to_boundaries(p, Point(p.center.x, p.C.y - 20.0))

        self.assertAlmostEqual(projection.inner.x, p.center.x, delta=1e-12)
        self.assertAlmostEqual(projection.outer.x, p.center.x, delta=1e-12)
        self.assertAlmostEqual(projection.inner.y, p.C.y, delta=1e-9)
        self.assertAlmostEqual(projection.outer.y, 0.5 * (p.I.y + p.K.y), delta=1e-9)
        self.assertAlmostEqual(projection.width, projection.inner.y - projection.outer.y, delta=1e-9)

    def test_bottom_straight_uses_bottom_lines(self) -> None:
        """Project positions below the turn centers onto the bottom lines."""
        p = self.points
        projection = project_to_boundaries(p, Point(p.center.x, p.D.y + 20.0))

        self.assertAlmostEqual(projection.inner.y, p.D.y, delta=1e-9)
        self.assertAlmostEqual(projection.outer.y, 0.5 * (p.J.y + p.L.y), delta=1e-9)

    def test_straight_end_belongs_to_straight_regime(self) -> None:
        """Project positions exactly at ``A.x`` or ``B.x`` as straights."""
        p = self.points
        self.assertFalse(is_turn_regime(p, p.A.x))
        self.assertFalse(is_turn_regime(p, p.B.x))
        self.assertTrue(is_turn_regime(p, p.A.x + 1e-6))
        self.assertTrue(is_turn_regime(p, p.B.x - 1e-6))

        at_pivot = project_to_boundaries(p, Point(p.A.x, p.C.y - 20.0))
        self.assertAlmostEqual(at_pivot.inner.x, p.C.x, delta=1e-12)
        self.assertAlmostEqual(at_pivot.inner.y, p.C.y, delta=1e-9)
        self.assertAlmostEqual(at_pivot.outer.y, p.I.y, delta=1e-9)

        at_jammer = project_to_boundaries(p, Point(p.B.x, p.E.y - 20.0))
        self.assertAlmostEqual(at_jammer.inner.y, p.E.y, delta=1e-9)
        self.assertAlmostEqual(at_jammer.outer.y, p.K.y, delta=1e-9)

    def test_left_turn_shares_angle_around_inner_center(self) -> None:
        """Place both projections at the position's angle around ``B``."""
        p = self.points
        projection = project_to_boundaries(p, Point(p.B.x - 50.0, p.B.y))

        self.assertAlmostEqual(projection.inner.x, p.B.x - p.inner_radius, delta=1e-9)
        self.assertAlmostEqual(projection.inner.y, p.B.y, delta=1e-9)
        self.assertAlmostEqual(projection.outer.x, p.H.x - p.outer_radius, delta=1e-9)
        self.assertAlmostEqual(projection.outer.y, p.H.y, delta=1e-9)

    def test_right_turn_shares_angle_around_inner_center(self) -> None:
        """Use ``A`` for the angle and ``G`` for the outer point on the right."""
        p = self.points
        projection = project_to_boundaries(p, Point(p.A.x + 40.0, p.A.y - 40.0))
        c = math.cos(-0.25 * math.pi)
        s = math.sin(-0.25 * math.pi)

        self.assertAlmostEqual(projection.inner.x, p.A.x + p.inner_radius * c, delta=1e-9)
        self.assertAlmostEqual(projection.inner.y, p.A.y + p.inner_radius * s, delta=1e-9)
        self.assertAlmostEqual(projection.outer.x, p.G.x + p.outer_radius * c, delta=1e-9)
        self.assertAlmostEqual(projection.outer.y, p.G.y + p.outer_radius * s, delta=1e-9)

    def test_projection_is_deterministic_at_turn_center(self) -> None:
        """Return finite, repeatable results for a position on a turn center."""
        p = self.points
        first = project_to_boundaries(p, p.A)
        second = project_to_boundaries(p, p.A)

        self.assertEqual(first, second)
        self.assertTrue(math.isfinite(first.inner.y))
        self.assertTrue(math.isfinite(first.outer.y))


if __name__ == "__main__":
    unittest.main()
