"""
Scale helpers for mapping plot data into normalized drawing space.
"""

import numpy as np


def rescale(values, from_range=None, to=(0.0, 1.0)):
    """
    Linearly map values from from_range onto to.

    from_range defaults to the data's own (min, max). A zero-width source
    range maps every value to the middle of the target range.
    """
    values = np.asarray(values, dtype=float)
    if from_range is None:
        from_range = (np.nanmin(values), np.nanmax(values)) if values.size else (0.0, 1.0)

    lo, hi = (float(v) for v in from_range)
    to_lo, to_hi = (float(v) for v in to)

    if np.isclose(hi, lo):
        return np.full_like(values, (to_lo + to_hi) / 2.0)

    return to_lo + (values - lo) / (hi - lo) * (to_hi - to_lo)


def resolution(values, zero=False):
    """
    Smallest gap between distinct values.

    Returns 1 when the values span a zero range (a single bar, say). With
    zero=True, 0 is counted as one of the values.
    """
    values = np.asarray(values, dtype=float)
    values = values[np.isfinite(values)]

    if values.size == 0 or np.isclose(values.min(), values.max()):
        return 1.0

    unique = np.unique(values)
    if zero:
        unique = np.unique(np.append(unique, 0.0))

    return float(np.min(np.diff(unique)))
