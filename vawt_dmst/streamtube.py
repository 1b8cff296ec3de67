# -*- coding: utf-8 -*-
# pylint: disable=invalid-name

"""
Streamtube momentum balance
---------------------------

A single streamtube of the double-multiple-streamtube model: velocity
triangle at the foil, blade element force and the momentum (Glauert) thrust
that it has to balance.
"""

import logging
from collections import namedtuple

import numpy as np

from .transforms import Rotation2D, rot_vec

logger = logging.getLogger(__name__)

#: Bracket searched for the induction factor
A_BRACKET = (-2.0, 2.0)

#: Number of fixed point iterations when the bracket holds no root
STRICKLAND_ITERATIONS = 10

VAWTCase = namedtuple('VAWTCase', ['re', 'tsr', 'solidity', 'aerofoil'])
VAWTCase.__doc__ = """Turbine settings shared by all streamtubes of a solve

Args:
    re (double): Reynolds number of the turbine
    tsr (double): Tip speed ratio
    solidity (double): Turbine solidity
    aerofoil (Aerofoil): Lift and drag surfaces of the blade profile
"""


class Velocity:
    """Non-dimensional velocity vector in global rotor coordinates"""

    __slots__ = ('x', 'y')

    def __init__(self, x, y):
        self.x = x
        self.y = y

    @classmethod
    def from_global(cls, x, y):
        return cls(x, y)

    @classmethod
    def from_tangential(cls, x, y, theta):
        """Velocity given in the frame of the foil position theta"""
        return cls(*rot_vec(x, y, theta))

    def __sub__(self, rhs):
        return Velocity(self.x - rhs.x, self.y - rhs.y)

    def to_foil(self, theta, beta):
        """Components in the chord frame of a foil pitched by beta"""
        return (Rotation2D(theta) * Rotation2D(beta)).inverse_transform(
            (self.x, self.y))

    def magnitude(self):
        return np.hypot(self.x, self.y)


class StreamTube:
    """One streamtube at rotor position theta

    Args:
        theta (double): Streamtube position in the turbine (radians)
        beta (double): Foil pitch angle (radians)
        a_0 (double): Induction factor of the upstream streamtube, 0 for
            streamtubes on the upwind half
    """

    def __init__(self, theta, beta, a_0):
        self.theta = theta
        self.beta = beta
        self.a_0 = a_0

    def __repr__(self):
        return "StreamTube(theta=%r, beta=%r, a_0=%r)"%(
            self.theta, self.beta, self.a_0)

    def c_0(self):
        """Reference wind speed at the streamtube"""
        return 1.0 - 2.0 * self.a_0

    def c_1_vec(self, a):
        """Wind speed at the foil"""
        return Velocity.from_global(0.0, -self.c_0() * (1.0 - a))

    def w_vec(self, a, case):
        """Relative velocity at the foil in global coordinates"""
        return self.c_1_vec(a) - Velocity.from_tangential(0.0, case.tsr,
                                                          self.theta)

    def w_alpha_re(self, a, case):
        """Relative velocity magnitude, angle of attack and local Reynolds number

        Args:
            a (double): Induction factor
            case (VAWTCase): Turbine settings
        Return:
            (w, alpha, re): Velocity magnitude, angle of attack (radians) and
            Reynolds number at the foil
        """
        w = self.w_vec(a, case)
        w_x_foil, w_y_foil = w.to_foil(self.theta, self.beta)
        alpha = np.arctan2(w_y_foil, w_x_foil) + np.pi / 2.0
        w_norm = w.magnitude()
        return w_norm, alpha, case.re * w_norm

    def c_tan(self, a, case):
        """Tangential foil coefficient"""
        _, alpha, re = self.w_alpha_re(a, case)
        return case.aerofoil.cl_cd(alpha, re).to_tangential(alpha, self.beta)[1]

    def c_norm(self, a, case):
        """Normal foil coefficient"""
        _, alpha, re = self.w_alpha_re(a, case)
        return case.aerofoil.cl_cd(alpha, re).to_tangential(alpha, self.beta)[0]

    def foil_thrust(self, a, case):
        """Thrust coefficient of the streamtube from the blade forces"""
        w, alpha, re = self.w_alpha_re(a, case)
        _, force_coeff = case.aerofoil.cl_cd(alpha, re).to_global(
            alpha, self.beta, self.theta)
        return (-force_coeff * (w / self.c_0())**2 * case.solidity
                / (np.pi * abs(np.sin(self.theta))))

    @staticmethod
    def wind_thrust(a):
        """Thrust coefficient by momentum theory or Glauert empirical formula

        A crude straight line approximation of the Glauert formula is used
        for 0.4 <= a <= 1.0, i.e. 0.96 <= CT <= 2.0.
        """
        if a < 0.4:
            return 4.0 * a * (1.0 - a)
        return 26.0 / 15.0 * a + 4.0 / 15.0

    def thrust_error(self, a, case):
        """Difference between foil thrust and wind thrust at induction a"""
        return self.foil_thrust(a, case) - self.wind_thrust(a)

    def is_bracketed(self, case):
        """True if the thrust error changes sign over the search bracket"""
        a_left, a_right = A_BRACKET
        return (self.thrust_error(a_left, case)
                * self.thrust_error(a_right, case)) <= 0.0

    def a_strickland(self, case):
        """Fixed point iteration for a, clipped at 1.0"""
        a = 0.0
        for _ in range(STRICKLAND_ITERATIONS):
            a = min(0.25 * self.foil_thrust(a, case) + a**2, 1.0)
        return a

    def solve_a(self, case, epsilon):
        """Solve the streamtube for its induction factor

        Bisection on the thrust error within ``A_BRACKET``; when the error
        does not change sign over the bracket the fixed point iteration of
        :meth:`a_strickland` is used instead.

        Args:
            case (VAWTCase): Turbine settings
            epsilon (double): Width of the final bracket
        Return:
            a (double): Induction factor
        """
        a_left, a_right = A_BRACKET
        err_left = self.thrust_error(a_left, case)
        err_right = self.thrust_error(a_right, case)
        if err_left * err_right > 0.0:
            logger.debug("No root bracketed at theta = %.4f, using fixed "
                         "point iteration", self.theta)
            return self.a_strickland(case)

        while (a_right - a_left) > epsilon:
            a = a_left + (a_right - a_left) / 2.0
            err = self.thrust_error(a, case)
            if err_left * err <= 0.0:
                a_right = a
            else:
                a_left = a
                err_left = err
        return a_left + (a_right - a_left) / 2.0


class StreamTubeSolution:
    """Solved streamtube, evaluates derived quantities on demand"""

    def __init__(self, case, tube, a):
        self.case = case
        self.tube = tube
        self._a = a

    def a(self):
        """Induction factor of the solution"""
        return self._a

    def a_0(self):
        """Induction factor of the upstream streamtube"""
        return self.tube.a_0

    def beta(self):
        """Pitch angle in radians"""
        return self.tube.beta

    def theta(self):
        """Streamtube location in radians"""
        return self.tube.theta

    def w(self):
        """Relative wind speed at the foil"""
        return self.tube.w_vec(self._a, self.case).magnitude()

    def alpha(self):
        """Angle of attack at the foil"""
        return self.tube.w_alpha_re(self._a, self.case)[1]

    def re(self):
        """Local Reynolds number at the foil"""
        return self.w() * self.case.re

    def thrust_error(self):
        """Difference between foil thrust and wind thrust of the solution"""
        return self.tube.thrust_error(self._a, self.case)

    def foil_thrust(self):
        return self.tube.foil_thrust(self._a, self.case)

    def c_tan(self):
        """Tangential foil coefficient

        Lift and drag coefficients evaluated in the tangential direction
        """
        return self.tube.c_tan(self._a, self.case)

    def c_norm(self):
        return self.tube.c_norm(self._a, self.case)
