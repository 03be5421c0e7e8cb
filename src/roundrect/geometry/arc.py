"""
Circular arc sampling.
"""

import numpy as np

from roundrect.errors import InvalidInput


def sample_arc(center, radius, start_angle, end_angle, n_points=20):
    """
    Sample a circular arc.

    Args:
        center: (x, y) of the circle
        radius: circle radius; 0 collapses every sample onto the center
        start_angle: first angle in radians
        end_angle: last angle in radians, sampled inclusively
        n_points: number of samples, at least 2

    Returns:
        (n_points, 2) array ordered from start_angle to end_angle
    """
    if n_points < 2:
        raise InvalidInput("n_points", f"An arc needs at least 2 points, got {n_points}.")

    theta = np.linspace(start_angle, end_angle, int(n_points))
    cx, cy = center
    return np.column_stack([cx + radius * np.cos(theta), cy + radius * np.sin(theta)])
