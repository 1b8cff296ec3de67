# -*- coding: utf-8 -*-
# pylint: disable=invalid-name

"""
Polar file utilities
--------------------

Readers that turn polar tables on disk into the plain ``(aoa, cl, cd)`` rows
consumed by :class:`~vawt_dmst.aerofoil.AerofoilBuilder`.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
import yaml

from .exceptions import MalformedPolarError

logger = logging.getLogger(__name__)

#: Column names of a polar table, angle of attack in degrees
POLAR_COLUMNS = ['aoa', 'cl', 'cd']


def read_polar_csv(csv_file, delimiter=','):
    """Load a header-less ``aoa, cl, cd`` polar table

    Args:
        csv_file (string): Path of the polar file
        delimiter (string): Column delimiter
    Return:
        data (pd.DataFrame): DataFrame with ``aoa`` (degrees), ``cl`` and
        ``cd`` columns
    """
    fpath = Path(csv_file).resolve()
    data = pd.read_csv(fpath, header=None, sep=delimiter,
                       skipinitialspace=True, comment='#')
    if data.shape[1] != len(POLAR_COLUMNS):
        raise MalformedPolarError(
            "Expected %d columns in %s, found %d"%(
                len(POLAR_COLUMNS), fpath, data.shape[1]))
    data.columns = POLAR_COLUMNS
    logger.debug("Read %d polar rows from %s", len(data), fpath)
    return data.astype(float)


def polar_rows(source_rows):
    """Convert polar data into a ``(n, 3)`` float array

    Args:
        source_rows: DataFrame with ``aoa``, ``cl``, ``cd`` columns or an
            array-like of ``(aoa, cl, cd)`` rows
    Return:
        rows (np.ndarray): ``(n, 3)`` array, angle of attack in degrees
    """
    if isinstance(source_rows, pd.DataFrame):
        missing = set(POLAR_COLUMNS) - set(source_rows.columns)
        if missing:
            raise MalformedPolarError(
                "Polar table is missing columns: %s"%', '.join(sorted(missing)))
        source_rows = source_rows[POLAR_COLUMNS].to_numpy()

    try:
        rows = np.array(source_rows, dtype=float)
    except ValueError as err:
        raise MalformedPolarError("Polar rows have inconsistent lengths") from err
    if rows.ndim != 2 or rows.shape[1] != len(POLAR_COLUMNS):
        raise MalformedPolarError(
            "Polar rows must be (aoa, cl, cd) triplets, got shape %s"%(
                rows.shape,))
    return rows


class PolarTableDB:
    """Polar lookup table database for multiple aerofoils

    Load polars for several aerofoils and Reynolds numbers from a yaml file
    of the form::

        NACA0018:
          symmetric: true
          aspect_ratio: 12.8
          aspect_ratio_correction: true
          polars:
            - re: 40000
              aoa: [...]
              cl: [...]
              cd: [...]
    """
    def __init__(self, yaml_file):
        with open(yaml_file, 'r') as f:
            self.af_data = yaml.load(f.read(), Loader=yaml.SafeLoader)

    def get_airfoils(self):
        """Get list of available aerofoils"""
        return list(self.af_data.keys())

    def get_reynolds_numbers(self, airfoil):
        """Get the sorted Reynolds numbers available for an aerofoil"""
        return sorted(float(p['re']) for p in self.af_data[airfoil]['polars'])

    def get_polar(self, airfoil, re):
        """Get polar data for given aerofoil and Reynolds number

        Args:
            airfoil (string): Aerofoil name
            re (double): Reynolds number
        Return:
            data (pd.DataFrame): Polar with ``aoa``, ``cl``, ``cd`` columns
        """
        for polar in self.af_data[airfoil]['polars']:
            if float(polar['re']) == float(re):
                return pd.DataFrame(
                    {k: polar[k] for k in POLAR_COLUMNS}).astype(float)
        raise KeyError("No polar for %s at Re = %g"%(airfoil, re))

    def builder(self, airfoil):
        """Return an AerofoilBuilder loaded with all polars of an aerofoil

        Args:
            airfoil (string): Aerofoil name
        Return:
            builder (AerofoilBuilder): Builder ready to be configured
        """
        from .aerofoil import AerofoilBuilder

        entry = self.af_data[airfoil]
        bld = AerofoilBuilder()
        for re in self.get_reynolds_numbers(airfoil):
            bld.load_data(self.get_polar(airfoil, re), re)
        bld.symmetric(bool(entry.get('symmetric', False)))
        if 'aspect_ratio' in entry:
            bld.set_aspect_ratio(float(entry['aspect_ratio']))
        bld.request_aspect_ratio_correction(
            bool(entry.get('aspect_ratio_correction', False)))
        return bld
