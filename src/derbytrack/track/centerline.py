"""Track-relative position along the centerline.

Positions are arc lengths along the mid-track line, measured from the pivot
line (right end of straight1) and increasing in skating order: straight1,
turn1, straight2, turn2. On screen that is counterclockwise. The value wraps
at ``lap_length``, so ahead/behind comparisons use circular distances.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from derbytrack.track.curves import normalize_angle
from derbytrack.track.models import Point, ReferencePoints, Zone
from derbytrack.track.projection import (
    BoundaryProjection,
    is_turn_regime,
    project_on_straight,
    project_on_turn,
)

HALF_PI = 0.5 * math.pi


@dataclass(frozen=True)
class TrackSection:
    """One zone's stretch of the centerline.

    Args:
        zone: Zone the section runs through.
        start: Track position where the section begins [px].
        end: Track position where the section ends [px].
    """

    zone: Zone
    start: float
    end: float

    @property
    def length(self) -> float:
        """Section length along the centerline [px].

        Returns:
            ``end - start``.
        """
        return self.end - self.start


@dataclass(frozen=True)
class TrackAxis:
    """Scalar ordering of positions around the oval.

    Args:
        points: Reference points the axis was built from.
        sections: The four centerline sections in skating order.
    """

    points: ReferencePoints
    sections: tuple[TrackSection, ...]

    @property
    def lap_length(self) -> float:
        """Centerline length of one lap [px].

        Returns:
            End position of the last section.
        """
        return self.sections[-1].end

    def wrap(self, position: float) -> float:
        """Wrap a track position into ``[0, lap_length)``.

        Args:
            position: Unwrapped track position [px].

        Returns:
            Equivalent position within one lap [px].
        """
        lap = self.lap_length
        wrapped = math.fmod(position, lap)
        if wrapped < 0.0:
            wrapped += lap
        return 0.0 if wrapped >= lap else wrapped

    def forward_distance(self, start: float, end: float) -> float:
        """Distance travelled skating forward from ``start`` to ``end``.

        Args:
            start: Track position [px].
            end: Track position [px].

        Returns:
            Forward distance in ``[0, lap_length)`` [px].
        """
        return self.wrap(end - start)

    def gap(self, first: float, second: float) -> float:
        """Shortest circular distance between two track positions.

        Args:
            first: Track position [px].
            second: Track position [px].

        Returns:
            Distance in either direction, whichever is shorter [px].
        """
        forward = self.forward_distance(first, second)
        return min(forward, self.lap_length - forward)

    def section_at(self, position: float) -> tuple[TrackSection, float]:
        """Find the section holding a track position.

        Args:
            position: Track position [px]; wrapped into one lap first.

        Returns:
            The section and the fraction ``[0, 1)`` travelled through it.
        """
        local = self.wrap(position)
        for section in self.sections:
            if local < section.end:
                return section, (local - section.start) / section.length
        last = self.sections[-1]
        return last, 1.0

    def turn_angle(self, zone: Zone, fraction: float) -> float:
        """Polar angle around the inner turn center at a turn fraction.

        Turn1 runs from the top (``-pi/2``) around the left center to the
        bottom; turn2 from the bottom (``pi/2``) around the right center
        back to the top. Both sweep towards decreasing angles.

        Args:
            zone: ``Zone.TURN1`` or ``Zone.TURN2``.
            fraction: Fraction travelled through the turn.

        Returns:
            Polar angle [rad].
        """
        start = -HALF_PI if zone == Zone.TURN1 else HALF_PI
        return start - fraction * math.pi

    def position_of(self, point: Point) -> float:
        """Map a pixel position to its track position.

        Turn positions use the polar angle around the mid-track turn center,
        halfway between the inner and outer turn centers. That center is the
        one the cross-section midpoints of ``boundary_points_at`` circle, so
        a midpoint maps back to the position it was built from.

        Args:
            point: Pixel position.

        Returns:
            Track position in ``[0, lap_length)`` [px].
        """
        p = self.points
        straight1, turn1, straight2, turn2 = self.sections
        if is_turn_regime(p, point.x):
            if point.x > p.A.x:
                section = turn2
                center_x, center_y = 0.5 * (p.A.x + p.G.x), 0.5 * (p.A.y + p.G.y)
                angle = math.atan2(point.y - center_y, point.x - center_x)
                fraction = normalize_angle(HALF_PI - angle) / math.pi
            else:
                section = turn1
                center_x, center_y = 0.5 * (p.B.x + p.H.x), 0.5 * (p.B.y + p.H.y)
                angle = math.atan2(point.y - center_y, point.x - center_x)
                fraction = normalize_angle(-HALF_PI - angle) / math.pi
        else:
            span = p.A.x - p.B.x
            if point.y < p.A.y:
                section = straight1
                fraction = (p.A.x - point.x) / span
            else:
                section = straight2
                fraction = (point.x - p.B.x) / span
        fraction = min(1.0, max(0.0, fraction))
        return self.wrap(section.start + fraction * section.length)

    def boundary_points_at(self, position: float) -> BoundaryProjection:
        """Inner and outer boundary points at a track position.

        Args:
            position: Track position [px].

        Returns:
            Cross-section of the track at ``position``.
        """
        p = self.points
        section, fraction = self.section_at(position)
        if section.zone == Zone.STRAIGHT1:
            return project_on_straight(p, p.A.x - fraction * (p.A.x - p.B.x), top=True)
        if section.zone == Zone.STRAIGHT2:
            return project_on_straight(p, p.B.x + fraction * (p.A.x - p.B.x), top=False)
        angle = self.turn_angle(section.zone, fraction)
        return project_on_turn(p, angle, right_side=section.zone == Zone.TURN2)


def build_track_axis(points: ReferencePoints) -> TrackAxis:
    """Build the track-relative axis for one reference-point set.

    Straight sections take the length of the centerline between the straight
    ends; turns take half the circumference of the mean turn radius.

    Args:
        points: Reference points.

    Returns:
        Axis with four contiguous sections covering one lap.
    """
    p = points
    top_length = math.hypot(
        0.5 * (p.C.x + p.I.x) - 0.5 * (p.E.x + p.K.x),
        0.5 * (p.C.y + p.I.y) - 0.5 * (p.E.y + p.K.y),
    )
    bottom_length = math.hypot(
        0.5 * (p.D.x + p.J.x) - 0.5 * (p.F.x + p.L.x),
        0.5 * (p.D.y + p.J.y) - 0.5 * (p.F.y + p.L.y),
    )
    turn_length = math.pi * 0.5 * (p.inner_radius + p.outer_radius)

    sections: list[TrackSection] = []
    start = 0.0
    for zone, length in (
        (Zone.STRAIGHT1, top_length),
        (Zone.TURN1, turn_length),
        (Zone.STRAIGHT2, bottom_length),
        (Zone.TURN2, turn_length),
    ):
        sections.append(TrackSection(zone=zone, start=start, end=start + length))
        start += length
    return TrackAxis(points=points, sections=tuple(sections))
