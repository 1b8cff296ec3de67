# -*- coding: utf-8 -*-
# pylint: disable=invalid-name

"""
Interpolation utilities
-----------------------

Thin wrappers around :mod:`scipy.interpolate` with the clamping behaviour
the aerofoil tables and the rotor solution need.
"""

import numpy as np
import scipy.interpolate as sint


def linear_interpolator(x, y):
    """Return a 1-D linear interpolator clamped to the end values

    Args:
        x (np.ndarray): Sample locations
        y (np.ndarray): Sample values
    Return:
        interpfn (callable): Interpolation function
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return sint.interp1d(x, y, bounds_error=False,
                         fill_value=(y[0], y[-1]))


class BilinearSurface:
    """Bilinear interpolation over a rectangular grid

    The grid is given as parallel, flattened ``(x, y, z)`` sequences; every
    ``(x, y)`` combination of the distinct ``x`` and ``y`` values must appear
    exactly once. Queries outside the grid are clamped to the nearest edge.
    """

    def __init__(self, x, y, z):
        """
        Args:
            x (np.ndarray): x-coordinate of every sample
            y (np.ndarray): y-coordinate of every sample
            z (np.ndarray): Value at every sample
        """
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        z = np.asarray(z, dtype=float)
        if not (x.shape == y.shape == z.shape):
            raise ValueError("Shape mismatch between x, y and z")

        self.xgrid = np.unique(x)
        self.ygrid = np.unique(y)
        if self.xgrid.size * self.ygrid.size != z.size:
            raise ValueError("Samples do not form a rectangular grid")

        values = np.full((self.xgrid.size, self.ygrid.size), np.nan)
        values[np.searchsorted(self.xgrid, x),
               np.searchsorted(self.ygrid, y)] = z
        if np.isnan(values).any():
            raise ValueError("Samples do not form a rectangular grid")

        self._interp = sint.RegularGridInterpolator(
            (self.xgrid, self.ygrid), values, method='linear',
            bounds_error=False, fill_value=None)

    def __call__(self, x, y):
        """Evaluate the surface at (x, y)

        Args:
            x (float or np.ndarray): x-coordinates
            y (float or np.ndarray): y-coordinates, broadcast against x
        Return:
            z (float or np.ndarray): Interpolated values
        """
        scalar = np.ndim(x) == 0 and np.ndim(y) == 0
        xb, yb = np.broadcast_arrays(
            np.clip(np.atleast_1d(x), self.xgrid[0], self.xgrid[-1]),
            np.clip(np.atleast_1d(y), self.ygrid[0], self.ygrid[-1]))
        z = self._interp(np.stack([xb, yb], axis=-1))
        if scalar:
            return float(z[0])
        return z
