"""Engagement zone curve built along the track-relative axis."""

from __future__ import annotations

from derbytrack.track.centerline import TrackAxis, TrackSection
from derbytrack.track.curves import ArcSegment, Curve, Segment, line
from derbytrack.track.models import Zone
from derbytrack.utils.constants import DEFAULT_ARC_RESOLUTION, SMALL_EPS


def _split_by_section(
    axis: TrackAxis,
    start: float,
    end: float,
) -> list[tuple[TrackSection, float, float]]:
    """Split an unwrapped track range at section borders.

    Sections are walked by index from the one holding ``start``; crossing
    the end of turn2 continues with straight1 one lap further on.

    Args:
        axis: Track-relative axis.
        start: Unwrapped range start [px].
        end: Unwrapped range end [px].

    Returns:
        ``(section, start_fraction, end_fraction)`` pieces in skating order.
    """
    if end - start <= SMALL_EPS:
        return []
    sections = axis.sections
    first, _ = axis.section_at(start)
    index = sections.index(first)
    lap_start = start - axis.wrap(start)

    pieces: list[tuple[TrackSection, float, float]] = []
    position = start
    while end - position > SMALL_EPS:
        section = sections[index]
        section_start = lap_start + section.start
        piece_end = max(position, min(end, lap_start + section.end))
        from_fraction = max(0.0, (position - section_start) / section.length)
        to_fraction = min(1.0, (piece_end - section_start) / section.length)
        pieces.append((section, from_fraction, to_fraction))
        position = piece_end
        index += 1
        if index == len(sections):
            index = 0
            lap_start += axis.lap_length
    return pieces


def _turn_arc(
    axis: TrackAxis,
    zone: Zone,
    from_fraction: float,
    to_fraction: float,
    outer: bool,
) -> ArcSegment:
    """Arc along one turn boundary between two turn fractions.

    Args:
        axis: Track-relative axis.
        zone: ``Zone.TURN1`` or ``Zone.TURN2``.
        from_fraction: Fraction where the arc starts.
        to_fraction: Fraction where the arc ends.
        outer: Follow the outer boundary instead of the inner one.

    Returns:
        Arc around the matching turn center.
    """
    p = axis.points
    right_side = zone == Zone.TURN2
    if outer:
        center, radius = (p.G if right_side else p.H), p.outer_radius
    else:
        center, radius = (p.A if right_side else p.B), p.inner_radius
    start_angle = axis.turn_angle(zone, from_fraction)
    end_angle = axis.turn_angle(zone, to_fraction)
    return ArcSegment(center=center, radius=radius, start_angle=start_angle, sweep=end_angle - start_angle)


def build_engagement_zone(
    axis: TrackAxis,
    start: float,
    end: float,
    arc_resolution: int = DEFAULT_ARC_RESOLUTION,
) -> Curve:
    """Build the region between two track positions across the full width.

    The curve follows the inner boundary forward from ``start`` to ``end``,
    crosses the track, and returns along the outer boundary. A range of a
    full lap or more covers the whole surface; the curve then runs once
    around each boundary joined by a crossing line.

    Args:
        axis: Track-relative axis.
        start: Unwrapped start position [px].
        end: Unwrapped end position [px]; not before ``start``.
        arc_resolution: Chords per half circle for the curve.

    Returns:
        Closed engagement zone curve.
    """
    end = min(max(end, start), start + axis.lap_length)
    pieces = _split_by_section(axis, start, end)

    inner: list[Segment] = []
    outer: list[Segment] = []
    for section, from_fraction, to_fraction in pieces:
        if section.zone in (Zone.TURN1, Zone.TURN2):
            inner.append(_turn_arc(axis, section.zone, from_fraction, to_fraction, outer=False))
            outer.append(_turn_arc(axis, section.zone, to_fraction, from_fraction, outer=True))
            continue
        near = axis.boundary_points_at(section.start + from_fraction * section.length)
        far = axis.boundary_points_at(section.start + to_fraction * section.length)
        inner.append(line(near.inner, far.inner))
        outer.append(line(far.outer, near.outer))

    start_cut = axis.boundary_points_at(start)
    end_cut = axis.boundary_points_at(end)
    segments: list[Segment] = [
        *inner,
        line(end_cut.inner, end_cut.outer),
        *reversed(outer),
        line(start_cut.outer, start_cut.inner),
    ]
    return Curve(segments=tuple(segments), closed=True, arc_resolution=arc_resolution)
