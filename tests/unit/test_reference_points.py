"""Unit tests for reference-point generation and canvas sizing."""

from __future__ import annotations

import unittest

from derbytrack.track.models import REFERENCE_LABELS, TrackDimensions, TrackScale
from derbytrack.track.reference import build_track_scale, canvas_size, initialize_points
from derbytrack.utils.exceptions import ConfigurationError, DerbyTrackError, TrackGeometryError

ROTATION_PAIRS = (("A", "B"), ("C", "F"), ("D", "E"), ("G", "H"), ("I", "L"), ("J", "K"))


class ReferencePointTests(unittest.TestCase):
    """Check reference-point placement against the regulation offsets."""

    def test_scale_spans_track_width_across_canvas(self) -> None:
        """Map the 35.1 m track width onto the full canvas width."""
        scale = build_track_scale(351.0)
        self.assertAlmostEqual(scale.pixels_per_meter, 10.0, delta=1e-9)
        self.assertAlmostEqual(scale.feet_to_pixels(10.0), 30.48, delta=1e-9)
        self.assertAlmostEqual(scale.to_meters(30.48), 3.048, delta=1e-9)

    def test_points_follow_regulation_offsets(self) -> None:
        """Place turn centers and straight ends at scaled offsets from center."""
        points = initialize_points(351.0, 232.0)
        s = points.scale.pixels_per_meter

        self.assertAlmostEqual(points.A.x - 175.5, 5.33 * s, delta=1e-9)
        self.assertAlmostEqual(175.5 - points.B.x, 5.33 * s, delta=1e-9)
        self.assertAlmostEqual(116.0 - points.C.y, 3.81 * s, delta=1e-9)
        self.assertAlmostEqual(116.0 - points.G.y, 0.30 * s, delta=1e-9)
        self.assertAlmostEqual(116.0 - points.I.y, 8.38 * s, delta=1e-9)
        self.assertAlmostEqual(116.0 - points.K.y, 7.78 * s, delta=1e-9)
        self.assertAlmostEqual(points.inner_radius, 3.81 * s, delta=1e-9)
        self.assertAlmostEqual(points.outer_radius, 8.08 * s, delta=1e-9)

    def test_points_are_point_symmetric_about_center(self) -> None:
        """Map every point onto its partner under a half turn about the center."""
        points = initialize_points(800.0, 528.0)
        center = points.center
        self.assertEqual(set(points.as_dict()), set(REFERENCE_LABELS))

        for first, second in ROTATION_PAIRS:
            p, q = points[first], points[second]
            self.assertAlmostEqual(p.x + q.x, 2.0 * center.x, delta=1e-9)
            self.assertAlmostEqual(p.y + q.y, 2.0 * center.y, delta=1e-9)

    def test_inner_points_are_mirror_symmetric(self) -> None:
        """Mirror the inner straight ends about both center lines."""
        points = initialize_points(800.0, 528.0)
        center = points.center
        self.assertAlmostEqual(points.C.y, points.E.y, delta=1e-9)
        self.assertAlmostEqual(points.D.y, points.F.y, delta=1e-9)
        self.assertAlmostEqual(points.C.y + points.D.y, 2.0 * center.y, delta=1e-9)
        self.assertAlmostEqual(points.C.x + points.E.x, 2.0 * center.x, delta=1e-9)

    def test_rebuild_replaces_whole_set(self) -> None:
        """Produce a new, fully rescaled set with the requested revision."""
        small = initialize_points(351.0, 232.0)
        large = initialize_points(702.0, 464.0, revision=3)

        self.assertEqual(large.revision, 3)
        self.assertIsNot(small, large)
        for label in REFERENCE_LABELS:
            self.assertAlmostEqual(large[label].x, 2.0 * small[label].x, delta=1e-9)
            self.assertAlmostEqual(large[label].y, 2.0 * small[label].y, delta=1e-9)

    def test_unknown_label_raises_key_error(self) -> None:
        """Reject labels outside ``A`` through ``L``."""
        points = initialize_points(351.0, 232.0)
        with self.assertRaises(KeyError):
            _ = points["scale"]

    def test_invalid_canvas_and_scale_are_rejected(self) -> None:
        """Treat non-positive sizes and scales as construction failures."""
        with self.assertRaises(TrackGeometryError):
            initialize_points(0.0, 232.0)
        with self.assertRaises(TrackGeometryError):
            initialize_points(351.0, -1.0)
        with self.assertRaises(TrackGeometryError):
            TrackScale(pixels_per_meter=0.0)
        with self.assertRaises(TrackGeometryError):
            TrackScale(pixels_per_meter=float("nan"))
        with self.assertRaises(DerbyTrackError):
            build_track_scale(351.0, track_width=0.0)

    def test_invalid_dimensions_are_rejected(self) -> None:
        """Reject offsets where the outer boundary would not enclose the inner."""
        with self.assertRaises(ConfigurationError):
            initialize_points(351.0, 232.0, TrackDimensions(outer_vertical_offset_narrow=3.0))
        with self.assertRaises(ConfigurationError):
            TrackDimensions(center_point_offset=0.0).validate()
        with self.assertRaises(ConfigurationError):
            TrackDimensions(turn_center_offset=-0.1).validate()
        with self.assertRaises(ConfigurationError):
            TrackDimensions(track_width=10.0).validate()


class CanvasSizeTests(unittest.TestCase):
    """Check aspect-ratio fitting of the track canvas."""

    def test_wide_container_is_limited_by_height(self) -> None:
        """Shrink the width when the container is wider than 100:66."""
        size = canvas_size(2_000.0, 660.0)
        self.assertAlmostEqual(size.style_height, 660.0, delta=1e-9)
        self.assertAlmostEqual(size.style_width, 1_000.0, delta=1e-9)

    def test_tall_container_is_limited_by_width(self) -> None:
        """Shrink the height when the container is taller than 100:66."""
        size = canvas_size(1_000.0, 2_000.0, pixel_ratio=2.0)
        self.assertAlmostEqual(size.style_width, 1_000.0, delta=1e-9)
        self.assertAlmostEqual(size.style_height, 660.0, delta=1e-9)
        self.assertAlmostEqual(size.buffer_width, 2_000.0, delta=1e-9)
        self.assertAlmostEqual(size.buffer_height, 1_320.0, delta=1e-9)

    def test_invalid_pixel_ratio_is_rejected(self) -> None:
        """Reject non-positive device pixel ratios."""
        with self.assertRaises(TrackGeometryError):
            canvas_size(1_000.0, 660.0, pixel_ratio=0.0)


if __name__ == "__main__":
    unittest.main()
