"""Skater inputs and pack results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from derbytrack.track.curves import Curve
from derbytrack.track.models import Point


class SkaterRole(str, Enum):
    """Team skater positions."""

    BLOCKER = "blocker"
    PIVOT = "pivot"
    JAMMER = "jammer"


class OfficialRole(str, Enum):
    """Skating official positions."""

    JAM_REF_A = "jamRefA"
    JAM_REF_B = "jamRefB"
    BACK_PACK_REF = "backPackRef"
    FRONT_PACK_REF = "frontPackRef"
    OUTSIDE_PACK_REF = "outsidePackRef"
    ALTERNATE = "alternate"


PACK_ROLES = frozenset({SkaterRole.BLOCKER, SkaterRole.PIVOT})


@dataclass(frozen=True)
class Skater:
    """Position of one skater or official for a single update tick.

    Args:
        skater_id: Stable identifier from the position store.
        x: Center x-coordinate [px].
        y: Center y-coordinate [px].
        radius: Outline radius [px].
        role: Team or official role.
        team: Optional team identifier.
    """

    skater_id: str
    x: float
    y: float
    radius: float = 0.0
    role: SkaterRole | OfficialRole = SkaterRole.BLOCKER
    team: str | None = None

    @property
    def position(self) -> Point:
        """Center point.

        Returns:
            ``Point(x, y)``.
        """
        return Point(self.x, self.y)

    @property
    def counts_for_pack(self) -> bool:
        """Whether the role takes part in pack definition.

        Returns:
            ``True`` for blockers and pivots.
        """
        return self.role in PACK_ROLES


@dataclass(frozen=True)
class PackResult:
    """Pack membership and engagement zone for one tick.

    Args:
        members: Ids of skaters in the pack.
        rearmost: Id of the rearmost pack skater.
        foremost: Id of the foremost pack skater.
        clusters: Every proximity cluster of in-bounds blockers, ordered by
            the track position of its rearmost member.
        engagement_zone: Region 20 ft behind the rearmost to 20 ft ahead of
            the foremost pack skater, across the full track width.
        engagement_range: Unwrapped ``(start, end)`` track positions of the
            engagement zone [px].
    """

    members: frozenset[str] = field(default_factory=frozenset)
    rearmost: str | None = None
    foremost: str | None = None
    clusters: tuple[tuple[str, ...], ...] = ()
    engagement_zone: Curve | None = None
    engagement_range: tuple[float, float] | None = None

    @classmethod
    def empty(cls, clusters: tuple[tuple[str, ...], ...] = ()) -> PackResult:
        """Result for a tick without a pack.

        Args:
            clusters: Clusters found, none of which qualified as a pack.

        Returns:
            Result with no members and no engagement zone.
        """
        return cls(clusters=clusters)

    @property
    def has_pack(self) -> bool:
        """Whether a pack was found.

        Returns:
            ``True`` if at least one skater is in the pack.
        """
        return bool(self.members)

    def is_in_pack(self, skater_id: str) -> bool:
        """Check pack membership of one skater.

        Args:
            skater_id: Skater identifier.

        Returns:
            ``True`` if the skater is part of the pack.
        """
        return skater_id in self.members
