"""Matplotlib orbit-track plots: top view (x/z) and edge-on view (x/y)."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)


def draw_orbit_track(
    body: str,
    positions: np.ndarray,
    output_path: str | Path,
    parent: str | None = None,
    title: str | None = None,
) -> Path:
    """Render an orbit track to an image file.

    Parameters:
        body: Body name for labels.
        positions: Array of shape (n, 3) in AU, engine axes.
        output_path: Destination; the format follows the suffix (png, pdf, svg).
        parent: Name of the central body, drawn at the origin.
        title: Figure title (default "<body> orbit").

    Returns:
        The path written.

    Raises:
        ValueError: If positions is not an (n, 3) array.
    """
    try:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError('matplotlib is required for draw_orbit_track') from None

    pts = np.asarray(positions, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError(f'positions must have shape (n, 3), got {pts.shape}')

    path = Path(output_path)
    fig, (ax_top, ax_side) = plt.subplots(1, 2, figsize=(11.0, 5.5))
    fig.suptitle(title or f'{body} orbit')

    for ax, column, label in ((ax_top, 2, 'z (AU)'), (ax_side, 1, 'y (AU)')):
        ax.plot(pts[:, 0], pts[:, column], '-', linewidth=0.8, label=body)
        if len(pts):
            ax.plot(pts[0, 0], pts[0, column], 'o', markersize=4, label='start')
        ax.plot(0.0, 0.0, '+', color='black', markersize=8, label=parent or 'origin')
        ax.set_xlabel('x (AU)')
        ax.set_ylabel(label)
        ax.grid(True, linewidth=0.3)
    ax_top.set_aspect('equal', adjustable='datalim')
    ax_top.set_title('ecliptic plane')
    ax_side.set_title('edge-on')
    ax_top.legend(loc='upper right', fontsize='small')

    try:
        fig.savefig(path)
    finally:
        plt.close(fig)
    logger.info('Wrote orbit plot for %s to %s', body, path)
    return path
