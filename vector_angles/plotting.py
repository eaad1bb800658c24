import logging
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from . import geometric_primitives as gp
from . import report
from .pairing import AngleResult


logger = logging.getLogger(__name__)


def plot_vectors(
        vectors: Sequence[gp.Vector2],
        results: Optional[Sequence[AngleResult]] = None,
        ax=None,
):
    """
    Draws every vector as an arrow from the origin.
    If results are given, the first pair (smallest angle) is highlighted.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    coords = np.asarray([[v.x, v.y] for v in vectors], dtype=float).reshape(-1, 2)
    origins = np.zeros(coords.shape[0])
    ax.quiver(
        origins, origins, coords[:, 0], coords[:, 1],
        angles='xy', scale_units='xy', scale=1, color='grey', label='Vectors',
    )

    if results:
        closest = results[0]
        pair = np.asarray([list(closest.first), list(closest.second)], dtype=float)
        ax.quiver(
            [0, 0], [0, 0], pair[:, 0], pair[:, 1],
            angles='xy', scale_units='xy', scale=1, color='red',
            label=f'{report.THETA} = {closest.angle:.4f}',
        )

    # keep the origin and every finite arrow tip in view
    finite = np.abs(coords[np.isfinite(coords)])
    limit = max(1.0, float(finite.max())) * 1.1 if finite.size else 1.1
    ax.set_xlim(-limit, limit)
    ax.set_ylim(-limit, limit)
    ax.set_aspect('equal')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title('Vectors')
    ax.grid(True)
    ax.legend()
    return ax


def save_plot(
        vectors: Sequence[gp.Vector2],
        results: Optional[Sequence[AngleResult]],
        filename: str,
):
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_vectors(vectors, results, ax)
    fig.tight_layout()
    try:
        fig.savefig(filename)
    finally:
        plt.close(fig)
    logger.info('plot saved to %s', filename)
