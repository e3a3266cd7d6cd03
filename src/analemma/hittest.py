"""Pointer hit-testing against projected analemma curves."""

from collections.abc import Mapping, Sequence

import numpy as np

from analemma.models import ProjectedPoint


def nearest(
    pointer: ProjectedPoint,
    projected_traces: Mapping[str, Sequence[ProjectedPoint]],
    threshold_px: float,
) -> str | None:
    """Return the hour label owning the point closest to the pointer.

    Args:
        pointer: Pointer position in chart-local coordinates.
        projected_traces: Hour label -> projected points, in hour order.
        threshold_px: The closest point must lie strictly nearer than this.

    Returns:
        The matching hour label, or None when nothing is close enough.
        On equal distances the first hour (then first day) wins.
    """
    best_label: str | None = None
    best_distance = float(threshold_px)
    for label, points in projected_traces.items():
        if not points:
            continue
        xs = np.fromiter((p.x for p in points), dtype=float, count=len(points))
        ys = np.fromiter((p.y for p in points), dtype=float, count=len(points))
        distances = np.hypot(xs - pointer.x, ys - pointer.y)
        # argmin returns the first occurrence
        candidate = float(distances[int(np.argmin(distances))])
        if candidate < best_distance:
            best_distance = candidate
            best_label = label
    return best_label


def select_hour(
    pointer: ProjectedPoint,
    projected_traces: Mapping[str, Sequence[ProjectedPoint]],
    threshold_px: float,
    current: str,
) -> str:
    """Hour selected by a click, keeping the current one on a miss."""
    return nearest(pointer, projected_traces, threshold_px) or current
