"""Pack membership: clustering in-bounds blockers along the track."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from derbytrack.pack.config import PackRules
from derbytrack.pack.engagement import build_engagement_zone
from derbytrack.pack.models import PackResult, Skater
from derbytrack.track.classifier import is_in_bounds
from derbytrack.track.geometry import TrackGeometry, TrackSnapshot

FloatArray = npt.NDArray[np.float64]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClusterSpan:
    """Extent of one cluster along the track.

    Args:
        members: Indices into the position array, ordered rear to front.
        rear_position: Track position of the rearmost member [px].
        extent: Forward distance from rearmost to foremost member [px].
    """

    members: tuple[int, ...]
    rear_position: float
    extent: float

    @property
    def rearmost(self) -> int:
        """Index of the rearmost member.

        Returns:
            First member index.
        """
        return self.members[0]

    @property
    def foremost(self) -> int:
        """Index of the foremost member.

        Returns:
            Last member index.
        """
        return self.members[-1]


def find_clusters(positions: FloatArray, lap_length: float, threshold: float) -> list[list[int]]:
    """Group positions connected by gaps of at most ``threshold``.

    Two positions are linked when their circular gap around the lap is
    within the threshold; clusters are the connected components of that
    graph, so chains of close blockers merge even when their ends are far
    apart.

    Args:
        positions: Track positions [px].
        lap_length: Length of one lap [px].
        threshold: Maximum linking gap [px].

    Returns:
        Clusters as lists of indices, ordered by their smallest index.
    """
    count = int(positions.size)
    if count == 0:
        return []

    difference = np.abs(positions[:, None] - positions[None, :]) % lap_length
    gaps = np.minimum(difference, lap_length - difference)
    linked = np.triu(gaps <= threshold, k=1)

    parent = list(range(count))

    def find(index: int) -> int:
        """Root of a union-find tree with path halving.

        Args:
            index: Node index.

        Returns:
            Root index.
        """
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    for first, second in zip(*np.nonzero(linked)):
        root_first = find(int(first))
        root_second = find(int(second))
        if root_first != root_second:
            parent[max(root_first, root_second)] = min(root_first, root_second)

    groups: dict[int, list[int]] = {}
    for index in range(count):
        groups.setdefault(find(index), []).append(index)
    return [groups[root] for root in sorted(groups)]


def cluster_span(positions: FloatArray, members: list[int], lap_length: float) -> ClusterSpan:
    """Locate the rearmost and foremost members of a cluster.

    The cluster occupies the lap except for its largest internal gap; the
    member after that gap is rearmost and the one before it foremost. Ties
    prefer the gap across the lap origin.

    Args:
        positions: Track positions [px].
        members: Indices belonging to one cluster.
        lap_length: Length of one lap [px].

    Returns:
        Cluster members ordered rear to front with the cluster extent.
    """
    order = sorted(members, key=lambda index: float(positions[index]))
    ordered = positions[order]
    forward = np.diff(np.append(ordered, ordered[0] + lap_length))
    widest = (int(np.argmax(np.roll(forward, 1))) - 1) % len(order)
    rear_slot = (widest + 1) % len(order)
    rear_to_front = tuple(order[rear_slot:] + order[:rear_slot])
    return ClusterSpan(
        members=rear_to_front,
        rear_position=float(ordered[rear_slot]),
        extent=float(lap_length - forward[widest]),
    )


def _qualifies(span: ClusterSpan, blockers: list[Skater], rules: PackRules) -> bool:
    """Check whether a cluster is eligible to be the pack.

    Args:
        span: Cluster to check.
        blockers: In-bounds blockers the indices refer to.
        rules: Pack rules.

    Returns:
        ``True`` if the cluster meets size and team requirements.
    """
    if len(span.members) < rules.min_pack_size:
        return False
    if rules.require_both_teams:
        teams = {blockers[index].team for index in span.members}
        teams.discard(None)
        return len(teams) >= 2
    return True


def compute_pack(
    track: TrackGeometry | TrackSnapshot,
    skaters: Iterable[Skater],
    rules: PackRules | None = None,
) -> PackResult:
    """Determine the pack and its engagement zone for one tick.

    Only in-bounds blockers and pivots are considered. The pack is the
    largest qualifying proximity cluster; between equally large clusters the
    one whose foremost member is furthest along the lap wins.

    Args:
        track: Geometry facade or a snapshot taken from it; a facade is
            read once, so the whole tick uses one snapshot.
        skaters: All skaters and officials on the track this tick.
        rules: Pack rules. Defaults to :class:`PackRules`.

    Returns:
        Pack result, empty when no cluster qualifies.

    Raises:
        derbytrack.utils.exceptions.ConfigurationError: If ``rules`` fail
            validation.
    """
    active_rules = rules or PackRules()
    active_rules.validate()
    snapshot = track.snapshot if isinstance(track, TrackGeometry) else track

    blockers = [
        skater
        for skater in skaters
        if skater.counts_for_pack
        and is_in_bounds(snapshot.boundaries, skater.position, skater.radius)
    ]
    if not blockers:
        logger.debug("No in-bounds blockers; no pack")
        return PackResult.empty()

    axis = snapshot.axis
    scale = snapshot.scale
    lap_length = axis.lap_length
    positions = np.array([axis.position_of(b.position) for b in blockers], dtype=np.float64)
    threshold = scale.feet_to_pixels(active_rules.proximity_feet)

    spans = [
        cluster_span(positions, members, lap_length)
        for members in find_clusters(positions, lap_length, threshold)
    ]
    spans.sort(key=lambda span: span.rear_position)
    cluster_ids = tuple(
        tuple(blockers[index].skater_id for index in span.members) for span in spans
    )

    candidates = [span for span in spans if _qualifies(span, blockers, active_rules)]
    if not candidates:
        logger.debug("No cluster of %d in-bounds blockers qualifies as a pack", len(blockers))
        return PackResult.empty(clusters=cluster_ids)

    pack = max(
        candidates,
        key=lambda span: (len(span.members), float(positions[span.foremost])),
    )
    engagement = scale.feet_to_pixels(active_rules.engagement_feet)
    start = pack.rear_position - engagement
    end = pack.rear_position + pack.extent + engagement
    zone = build_engagement_zone(axis, start, end, arc_resolution=active_rules.arc_resolution)

    logger.debug(
        "Pack of %d/%d blockers spans %.2f m",
        len(pack.members),
        len(blockers),
        scale.to_meters(pack.extent),
    )
    return PackResult(
        members=frozenset(blockers[index].skater_id for index in pack.members),
        rearmost=blockers[pack.rearmost].skater_id,
        foremost=blockers[pack.foremost].skater_id,
        clusters=cluster_ids,
        engagement_zone=zone,
        engagement_range=(start, end),
    )
