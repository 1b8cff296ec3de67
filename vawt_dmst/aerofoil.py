# -*- coding: utf-8 -*-
# pylint: disable=invalid-name

"""
Aerofoil utilities
------------------

Collect polars measured at several Reynolds numbers, optionally correct them
for a finite aspect ratio, and expose them as continuous lift and drag
surfaces over angle of attack and Reynolds number.

"""

import bisect
import logging
from collections import namedtuple

import numpy as np
import pandas as pd

from .exceptions import (DuplicateReynoldsError, MalformedPolarError,
                         StallPointNotFoundError, UnsupportedCorrectionError)
from .interpolate import BilinearSurface, linear_interpolator
from .polars import polar_rows, read_polar_csv
from .transforms import Rotation2D

__all__ = ['ClCd', 'Aerofoil', 'AerofoilBuilder', 'PolarRow',
           'lanchester_prandtl', 'viterna_corrigan']

logger = logging.getLogger(__name__)

#: Aspect ratios at or above this value are treated as infinite
ASPECT_RATIO_LIMIT = 98.0

#: Finite stand-in for an infinite Reynolds number in the lookup grid
RE_MAX = np.finfo(float).max

#: Upper end (degrees) of the synthesized post-stall polar
POST_STALL_END_DEG = 90

PolarRow = namedtuple('PolarRow', ['re', 'alpha', 'cl', 'cd'])
PolarRow.__doc__ = """Polar at one Reynolds number, angles in radians"""


class ClCd(namedtuple('ClCd', ['cl', 'cd'])):
    """Aerofoil coefficients of lift and drag"""

    __slots__ = ()

    def to_tangential(self, alpha, beta):
        """Convert coefficients to normal and tangential turbine coordinates

        Args:
            alpha (double): Foil angle of attack (radians)
            beta (double): Pitch angle from turbine tangent to chord (radians)
        Return:
            (c_norm, c_tan): Normal and tangential force coefficients
        """
        return Rotation2D(alpha - beta)((self.cl, -self.cd))

    def to_global(self, alpha, beta, theta):
        """Convert coefficients to the global x/y directions of the rotor

        Args:
            alpha (double): Foil angle of attack (radians)
            beta (double): Pitch angle from turbine tangent to chord (radians)
            theta (double): Position angle of the foil on the rotor (radians)
        Return:
            (c_x, c_y): Force coefficients along global x and y
        """
        return Rotation2D(theta)(self.to_tangential(alpha, beta))


class Aerofoil:
    """Lift and drag surfaces of an aerofoil

    Instances are created by :meth:`AerofoilBuilder.build` and are read-only
    afterwards, so a single aerofoil can be shared by any number of solvers.
    """

    def __init__(self, alpha, re, cl, cd, symmetric=False):
        """
        Args:
            alpha (np.ndarray): Angle of attack of every sample (radians)
            re (np.ndarray): Reynolds number of every sample
            cl (np.ndarray): Lift coefficient of every sample
            cd (np.ndarray): Drag coefficient of every sample
            symmetric (bool): Fold negative angles onto positive ones
        """
        dmap = dict(alpha=alpha, re=re, cl=cl, cd=cd)
        for k, v in dmap.items():
            v = np.array(v, dtype=float)
            if v.shape != np.shape(alpha):
                raise MalformedPolarError("Shape mismatch for alpha and %s"%k)
            v.flags.writeable = False
            setattr(self, '_' + k, v)
        self._symmetric = bool(symmetric)
        self._cl_surf = BilinearSurface(self._re, self._alpha, self._cl)
        self._cd_surf = BilinearSurface(self._re, self._alpha, self._cd)

    @property
    def symmetric(self):
        """True if the profile is treated as symmetric"""
        return self._symmetric

    @property
    def data(self):
        """Flattened lookup table as a pandas DataFrame"""
        return pd.DataFrame(dict(alpha=self._alpha, re=self._re,
                                 cl=self._cl, cd=self._cd))

    def cl_cd(self, alpha, re):
        """Return lift and drag coefficients

        Args:
            alpha (double): Angle of attack (radians)
            re (double): Reynolds number
        Return:
            ClCd: (cl, cd) pair
        """
        if self._symmetric:
            cl = self._cl_surf(re, abs(alpha))
            cd = self._cd_surf(re, abs(alpha))
            if alpha < 0.0:
                cl = -cl
            return ClCd(cl, cd)
        return ClCd(self._cl_surf(re, alpha), self._cd_surf(re, alpha))

    def cl(self, alpha, re):
        """Return interpolated cl value"""
        return self.cl_cd(alpha, re).cl

    def cd(self, alpha, re):
        """Return interpolated cd value"""
        return self.cl_cd(alpha, re).cd

    def sample(self, alpha, re):
        """Evaluate the surfaces on every combination of alpha and re

        Args:
            alpha (np.ndarray): Angles of attack (radians)
            re (np.ndarray): Reynolds numbers
        Return:
            pd.DataFrame: Columns ``alpha``, ``re``, ``cl``, ``cd``
        """
        aa, rr = np.meshgrid(np.atleast_1d(alpha), np.atleast_1d(re),
                             indexing='ij')
        aa = aa.ravel()
        rr = rr.ravel()
        query = np.abs(aa) if self._symmetric else aa
        cl = np.atleast_1d(self._cl_surf(rr, query))
        cd = np.atleast_1d(self._cd_surf(rr, query))
        if self._symmetric:
            cl = np.where(aa < 0.0, -cl, cl)
        return pd.DataFrame(dict(alpha=aa, re=rr, cl=cl, cd=cd))


def lanchester_prandtl(alpha, cl, cd, aspect_ratio):
    """Finite wing correction below stall

    Args:
        alpha (np.ndarray): Angles of attack (radians)
        cl (np.ndarray): Lift coefficients
        cd (np.ndarray): Drag coefficients
        aspect_ratio (double): Blade aspect ratio
    Return:
        (alpha, cd): Corrected angles of attack and drag coefficients
    """
    return (alpha + cl / (np.pi * aspect_ratio),
            cd + cl * cl / (np.pi * aspect_ratio))


def viterna_corrigan(alpha, stall, aspect_ratio):
    """Post stall lift and drag from the Viterna-Corrigan model

    Args:
        alpha (np.ndarray): Angles of attack above stall (radians)
        stall (tuple): (alpha, cl, cd) at the stall point
        aspect_ratio (double): Blade aspect ratio
    Return:
        (cl, cd): Extrapolated lift and drag coefficients
    """
    if aspect_ratio > 50.0:
        cd_max = 2.01
    else:
        cd_max = 1.1 + 0.018 * aspect_ratio
    alpha_s, cl_s, cd_s = stall
    sa = np.sin(alpha_s)
    ca = np.cos(alpha_s)
    kd = (cd_s - cd_max * sa**2) / ca
    kl = (cl_s - cd_max * sa * ca) * sa / ca**2

    alpha = np.asarray(alpha, dtype=float)
    cl = cd_max / 2.0 * np.sin(2.0 * alpha) + kl * np.cos(alpha)**2 / np.sin(alpha)
    cd = cd_max * np.sin(alpha)**2 + kd * np.cos(alpha)
    return cl, cd


def stall_index(cl):
    """Index of the last sample before the lift coefficient first drops"""
    drops = np.nonzero(cl[:-1] > cl[1:])[0]
    if drops.size == 0:
        raise StallPointNotFoundError("stall point not found")
    return int(drops[0])


def resample_rows(rows):
    """Resample polars such that all of them share the same angles of attack

    Args:
        rows (list): List of PolarRow
    Return:
        rows (list): List of PolarRow on the union of all angles
    """
    alpha = np.unique(np.concatenate([r.alpha for r in rows]))
    return [PolarRow(r.re, alpha,
                     linear_interpolator(r.alpha, r.cl)(alpha),
                     linear_interpolator(r.alpha, r.cd)(alpha))
            for r in rows]


class AerofoilBuilder:
    """Accumulate polar data and build an :class:`Aerofoil`

    Example:

    .. code-block:: python

       aerofoil = (AerofoilBuilder()
                   .load_csv("NACA0018Re0040.data", 40000.0)
                   .load_csv("NACA0018Re0080.data", 80000.0)
                   .set_aspect_ratio(12.8)
                   .request_aspect_ratio_correction(True)
                   .symmetric(True)
                   .build())
    """

    def __init__(self):
        #: Polars sorted by ascending Reynolds number
        self.data = []
        self._symmetric = False
        self._aspect_ratio = np.inf
        self._update_aspect_ratio = False

    def __len__(self):
        return len(self.data)

    @property
    def reynolds_numbers(self):
        """Reynolds numbers of the loaded polars in ascending order"""
        return [r.re for r in self.data]

    @property
    def aspect_ratio(self):
        return self._aspect_ratio

    @property
    def is_symmetric(self):
        return self._symmetric

    def contains_re(self, re):
        """True if a polar for this Reynolds number is loaded"""
        idx = bisect.bisect_left(self.reynolds_numbers, re)
        return idx < len(self.data) and self.data[idx].re == re

    def load_data(self, source_rows, re):
        """Add the polar for one Reynolds number

        Args:
            source_rows: ``(aoa, cl, cd)`` rows with aoa in degrees, or a
                DataFrame with ``aoa``, ``cl`` and ``cd`` columns
            re (double): Reynolds number of the polar
        Return:
            self (AerofoilBuilder)
        """
        re = float(re)
        if self.contains_re(re):
            raise DuplicateReynoldsError(re)
        rows = polar_rows(source_rows)
        if rows.shape[0] < 2:
            raise MalformedPolarError(
                "Polar for Re = %g needs at least two samples"%re)
        alpha = np.radians(rows[:, 0])
        if np.any(np.diff(alpha) <= 0.0):
            raise MalformedPolarError(
                "Angles of attack for Re = %g are not strictly increasing"%re)

        idx = bisect.bisect_left(self.reynolds_numbers, re)
        self.data.insert(idx, PolarRow(re, alpha, rows[:, 1].copy(),
                                       rows[:, 2].copy()))
        logger.info("Loaded polar for Re = %g (%d samples)", re, rows.shape[0])
        return self

    def load_csv(self, csv_file, re, delimiter=','):
        """Read a header-less ``aoa, cl, cd`` file and add it as a polar"""
        return self.load_data(read_polar_csv(csv_file, delimiter), re)

    def set_aspect_ratio(self, value):
        """Set the blade aspect ratio (span / chord)"""
        self._aspect_ratio = float(value)
        return self

    def symmetric(self, flag=True):
        """Mark the profile as symmetric"""
        self._symmetric = bool(flag)
        return self

    def request_aspect_ratio_correction(self, flag=True):
        """Apply the aspect ratio correction during :meth:`build`"""
        self._update_aspect_ratio = bool(flag)
        return self

    def transformed_set(self):
        """Return copies of the polars, aspect ratio corrected if requested"""
        if (not self._update_aspect_ratio
                or self._aspect_ratio >= ASPECT_RATIO_LIMIT):
            return [PolarRow(r.re, r.alpha.copy(), r.cl.copy(), r.cd.copy())
                    for r in self.data]
        return [self.transform_row(r) for r in self.data]

    def transform_row(self, row):
        """Apply the aspect ratio correction to one polar

        Samples up to the stall point get the Lanchester-Prandtl correction,
        above stall the polar is replaced by Viterna-Corrigan values at every
        whole degree up to 90.
        """
        if not self._symmetric:
            raise UnsupportedCorrectionError(
                "aspect ratio correction for asymmetric profiles "
                "is not implemented")
        ar = self._aspect_ratio
        idx = stall_index(row.cl)

        cl = row.cl[:idx+1].copy()
        alpha, cd = lanchester_prandtl(row.alpha[:idx+1], cl,
                                       row.cd[:idx+1], ar)
        stall = (alpha[-1], cl[-1], cd[-1])

        start = int(np.floor(np.degrees(stall[0]))) + 1
        alpha_post = np.radians(np.arange(start, POST_STALL_END_DEG + 1,
                                          dtype=float))
        cl_post, cd_post = viterna_corrigan(alpha_post, stall, ar)
        logger.debug("Re = %g: stall at %.2f deg, %d post stall samples",
                     row.re, np.degrees(stall[0]), alpha_post.size)
        return PolarRow(row.re,
                        np.r_[alpha, alpha_post],
                        np.r_[cl, cl_post],
                        np.r_[cd, cd_post])

    def build(self):
        """Create the Aerofoil from the loaded data

        Return:
            aerofoil (Aerofoil): Read-only lift and drag surfaces
        """
        if not self.data:
            raise MalformedPolarError("No polar data loaded")

        rows = resample_rows(self.transformed_set())

        # duplicate lowest and highest Re for extrapolation over re
        if rows[0].re > 0.0:
            rows.insert(0, rows[0]._replace(re=0.0))
        if rows[-1].re < RE_MAX:
            rows.append(rows[-1]._replace(re=RE_MAX))

        nalpha = rows[0].alpha.size
        aerofoil = Aerofoil(
            alpha=np.concatenate([r.alpha for r in rows]),
            re=np.repeat([r.re for r in rows], nalpha),
            cl=np.concatenate([r.cl for r in rows]),
            cd=np.concatenate([r.cd for r in rows]),
            symmetric=self._symmetric)
        logger.info("Built aerofoil from %d polars on %d angles of attack",
                    len(self.data), nalpha)
        return aerofoil
