# -*- coding: utf-8 -*-

"""
Errors raised while assembling aerofoil data
--------------------------------------------

All of them are fatal for the ``load_data`` / ``build`` call that raised them;
the builder never hands out a partially built :class:`~vawt_dmst.Aerofoil`.
"""


class AerofoilError(Exception):
    """Base class for aerofoil data errors"""


class DuplicateReynoldsError(AerofoilError, ValueError):
    """A polar for this Reynolds number is already loaded"""

    def __init__(self, re):
        super().__init__("data for Re = %g is already loaded" % re)
        self.re = re


class MalformedPolarError(AerofoilError, ValueError):
    """Polar rows are inconsistent (shape, length or angle ordering)"""


class StallPointNotFoundError(AerofoilError, ValueError):
    """The lift coefficient never decreases, so no stall angle exists"""


class UnsupportedCorrectionError(AerofoilError, NotImplementedError):
    """Aspect ratio correction requested for an asymmetric profile"""
