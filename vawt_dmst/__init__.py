# -*- coding: utf-8 -*-

"""\
VAWT aerodynamics
-----------------

Implements the double-multiple-streamtube (DMST) model of a vertical axis
wind turbine: aerofoil lookup tables over angle of attack and Reynolds
number with finite aspect ratio corrections, the momentum balance of a
single streamtube, and the rotor solver that integrates torque and power
coefficients.

"""

import logging

from .aerofoil import *
from .exceptions import *
from .streamtube import StreamTube, StreamTubeSolution, VAWTCase
from .vawt import VAWTSolver, VAWTSolution
from .turbine_config import TurbineConfig
from .polars import PolarTableDB, read_polar_csv

logging.getLogger(__name__).addHandler(logging.NullHandler())
