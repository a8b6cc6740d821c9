"""Evaluate a sample jam start and export a debug figure of the pack."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import matplotlib
import numpy as np

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402

from derbytrack.pack import PackResult, Skater, SkaterRole, compute_pack  # noqa: E402
from derbytrack.track import TrackGeometry, TrackSnapshot, Zone, canvas_size  # noqa: E402
from derbytrack.track.curves import Curve  # noqa: E402
from derbytrack.utils import configure_logging  # noqa: E402

CONTAINER_WIDTH = 1_200.0
CONTAINER_HEIGHT = 900.0
SKATER_RADIUS_METERS = 0.35
ZONE_COLORS = {
    Zone.STRAIGHT1: "#dde7f7",
    Zone.TURN1: "#f7e6dd",
    Zone.STRAIGHT2: "#ddf7e3",
    Zone.TURN2: "#f1ddf7",
}

# (id, role, team, meters along the track, fraction of the way across)
LINEUP = (
    ("a1", SkaterRole.PIVOT, "A", 1.0, 0.3),
    ("a2", SkaterRole.BLOCKER, "A", 2.2, 0.6),
    ("a3", SkaterRole.BLOCKER, "A", 3.5, 0.4),
    ("a4", SkaterRole.BLOCKER, "A", 4.4, 0.75),
    ("b1", SkaterRole.PIVOT, "B", 1.4, 0.7),
    ("b2", SkaterRole.BLOCKER, "B", 2.8, 0.25),
    ("b3", SkaterRole.BLOCKER, "B", 3.9, 0.55),
    ("b4", SkaterRole.BLOCKER, "B", 14.0, 0.5),
    ("aj", SkaterRole.JAMMER, "A", 8.5, 0.35),
    ("bj", SkaterRole.JAMMER, "B", 8.6, 0.65),
)


def _place_lineup(snapshot: TrackSnapshot) -> list[Skater]:
    """Convert the lineup table into pixel-space skaters.

    Args:
        snapshot: Track geometry for the example canvas.

    Returns:
        Skaters positioned on the track.
    """
    scale = snapshot.scale
    radius = scale.to_pixels(SKATER_RADIUS_METERS)
    skaters: list[Skater] = []
    for skater_id, role, team, meters, across in LINEUP:
        section = snapshot.axis.boundary_points_at(scale.to_pixels(meters))
        x = section.inner.x + across * (section.outer.x - section.inner.x)
        y = section.inner.y + across * (section.outer.y - section.inner.y)
        skaters.append(Skater(skater_id, x, y, radius=radius, role=role, team=team))
    return skaters


def _draw_curve(axis: Axes, curve: Curve, **style: object) -> None:
    """Draw a curve's flattened outline.

    Args:
        axis: Target axes.
        curve: Curve to draw.
        **style: Keyword arguments forwarded to ``Axes.plot``.
    """
    vertices = curve.vertices
    if curve.closed:
        vertices = np.vstack([vertices, vertices[:1]])
    axis.plot(vertices[:, 0], vertices[:, 1], **style)


def _export_figure(snapshot: TrackSnapshot, skaters: list[Skater], pack: PackResult, path: Path) -> None:
    """Export the track, zones, skaters and engagement zone as a PNG.

    Args:
        snapshot: Track geometry.
        skaters: Skaters drawn on the track.
        pack: Pack evaluation result.
        path: Output path for the figure.
    """
    boundaries = snapshot.boundaries
    fig, axis = plt.subplots(figsize=(10.0, 6.6), constrained_layout=True)

    for zone, color in ZONE_COLORS.items():
        vertices = boundaries.zone_curve(zone).vertices
        axis.fill(vertices[:, 0], vertices[:, 1], color=color, zorder=0)
    if pack.engagement_zone is not None:
        vertices = pack.engagement_zone.vertices
        axis.fill(vertices[:, 0], vertices[:, 1], color="#90ee90", alpha=0.5, zorder=1)

    _draw_curve(axis, boundaries.inner, color="black", lw=1.5)
    _draw_curve(axis, boundaries.outer, color="black", lw=1.5)
    _draw_curve(axis, boundaries.mid_track, color="grey", lw=0.8, ls="--")
    _draw_curve(axis, boundaries.pivot_line, color="tab:blue", lw=2.0)
    _draw_curve(axis, boundaries.jammer_line, color="tab:red", lw=2.0)

    for skater in skaters:
        color = "tab:orange" if pack.is_in_pack(skater.skater_id) else "tab:grey"
        if skater.role == SkaterRole.JAMMER:
            color = "gold"
        axis.add_patch(plt.Circle((skater.x, skater.y), skater.radius, color=color, zorder=3))
        axis.annotate(skater.skater_id, (skater.x, skater.y), ha="center", va="center", fontsize=7, zorder=4)

    axis.set_aspect("equal")
    axis.invert_yaxis()
    axis.set_title("Pack and engagement zone")
    axis.set_axis_off()
    fig.savefig(path, dpi=160)
    plt.close(fig)


def main() -> None:
    """Run the sample lineup and export a figure plus a JSON summary."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("pack_scenario")

    project_root = Path(__file__).resolve().parents[1]
    output_dir = project_root / "examples" / "output" / "pack_scenario"
    output_dir.mkdir(parents=True, exist_ok=True)

    size = canvas_size(CONTAINER_WIDTH, CONTAINER_HEIGHT)
    geometry = TrackGeometry(size.buffer_width, size.buffer_height)
    snapshot = geometry.snapshot
    skaters = _place_lineup(snapshot)
    pack = compute_pack(snapshot, skaters)

    summary: dict[str, dict[str, object]] = {}
    for skater in skaters:
        description = geometry.describe(skater)
        summary[skater.skater_id] = {
            "role": skater.role.value,
            "zone": description.zone.name,
            "in_bounds": description.in_bounds,
            "track_position_m": round(snapshot.scale.to_meters(description.track_position), 3),
            "in_pack": pack.is_in_pack(skater.skater_id),
        }

    logger.info("Pack members: %s", ", ".join(sorted(pack.members)) or "none")
    logger.info("Rearmost: %s, foremost: %s", pack.rearmost, pack.foremost)

    _export_figure(snapshot, skaters, pack, output_dir / "pack.png")
    (output_dir / "skaters.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")
    logger.info("Pack scenario artifacts written to %s", output_dir)


if __name__ == "__main__":
    main()
