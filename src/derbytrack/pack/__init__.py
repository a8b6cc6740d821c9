"""Pack membership and engagement zone evaluation."""

from derbytrack.pack.config import PackRules, build_pack_rules
from derbytrack.pack.engagement import build_engagement_zone
from derbytrack.pack.engine import ClusterSpan, cluster_span, compute_pack, find_clusters
from derbytrack.pack.models import OfficialRole, PackResult, Skater, SkaterRole

__all__ = [
    "ClusterSpan",
    "OfficialRole",
    "PackResult",
    "PackRules",
    "Skater",
    "SkaterRole",
    "build_engagement_zone",
    "build_pack_rules",
    "cluster_span",
    "compute_pack",
    "find_clusters",
]
