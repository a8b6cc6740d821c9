"""Pack rule configuration."""

from __future__ import annotations

from dataclasses import dataclass

from derbytrack.utils.constants import DEFAULT_ARC_RESOLUTION
from derbytrack.utils.exceptions import ConfigurationError

DEFAULT_PROXIMITY_FEET = 10.0
DEFAULT_ENGAGEMENT_FEET = 20.0
DEFAULT_MIN_PACK_SIZE = 2
DEFAULT_REQUIRE_BOTH_TEAMS = False
MIN_ARC_RESOLUTION = 4


@dataclass(frozen=True)
class PackRules:
    """Distances and thresholds of the pack rule.

    Distances are real-world lengths; the engine converts them with the
    current track scale.

    Args:
        proximity_feet: Maximum track-relative gap that connects two blockers
            into one cluster [ft].
        engagement_feet: Extension of the engagement zone ahead of the
            foremost and behind the rearmost pack skater [ft].
        min_pack_size: Smallest cluster that counts as a pack.
        require_both_teams: Only accept clusters holding blockers of at least
            two different teams.
        arc_resolution: Chords per half circle for the engagement zone curve.
    """

    proximity_feet: float = DEFAULT_PROXIMITY_FEET
    engagement_feet: float = DEFAULT_ENGAGEMENT_FEET
    min_pack_size: int = DEFAULT_MIN_PACK_SIZE
    require_both_teams: bool = DEFAULT_REQUIRE_BOTH_TEAMS
    arc_resolution: int = DEFAULT_ARC_RESOLUTION

    def validate(self) -> None:
        """Validate pack rule settings.

        Raises:
            derbytrack.utils.exceptions.ConfigurationError: If a distance is
                non-positive, the minimum pack size is below one, or the arc
                resolution is too coarse.
        """
        if self.proximity_feet <= 0.0:
            msg = "proximity_feet must be positive"
            raise ConfigurationError(msg)
        if self.engagement_feet < 0.0:
            msg = "engagement_feet must be non-negative"
            raise ConfigurationError(msg)
        if self.min_pack_size < 1:
            msg = "min_pack_size must be at least 1"
            raise ConfigurationError(msg)
        if not isinstance(self.require_both_teams, bool):
            msg = "require_both_teams must be a boolean"
            raise ConfigurationError(msg)
        if self.arc_resolution < MIN_ARC_RESOLUTION:
            msg = f"arc_resolution must be at least {MIN_ARC_RESOLUTION}"
            raise ConfigurationError(msg)


def build_pack_rules(
    proximity_feet: float = DEFAULT_PROXIMITY_FEET,
    engagement_feet: float = DEFAULT_ENGAGEMENT_FEET,
    min_pack_size: int = DEFAULT_MIN_PACK_SIZE,
    require_both_teams: bool = DEFAULT_REQUIRE_BOTH_TEAMS,
    arc_resolution: int = DEFAULT_ARC_RESOLUTION,
) -> PackRules:
    """Build validated pack rules.

    Args:
        proximity_feet: Cluster proximity threshold [ft].
        engagement_feet: Engagement zone extension [ft].
        min_pack_size: Smallest cluster that counts as a pack.
        require_both_teams: Require blockers from two teams in the pack.
        arc_resolution: Chords per half circle for the engagement zone.

    Returns:
        Validated pack rules.

    Raises:
        derbytrack.utils.exceptions.ConfigurationError: If any setting
            violates its bound.
    """
    rules = PackRules(
        proximity_feet=proximity_feet,
        engagement_feet=engagement_feet,
        min_pack_size=min_pack_size,
        require_both_teams=require_both_teams,
        arc_resolution=arc_resolution,
    )
    rules.validate()
    return rules
