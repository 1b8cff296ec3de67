# -*- coding: utf-8 -*-
# pylint: disable=invalid-name

"""
Rotor solver
------------

Double-multiple-streamtube solution of a vertical axis wind turbine. The
rotor is split into ``n_streamtubes`` angular positions; every upwind
streamtube feeds its induction factor to the downwind streamtube at the
mirrored position.
"""

import logging

import numpy as np
import pandas as pd

from .streamtube import StreamTube, StreamTubeSolution, VAWTCase

logger = logging.getLogger(__name__)


class VAWTSolver:
    """DMST solver for a vertical axis wind turbine

    Defaults:

    - ``n_streamtubes = 50`` number of streamtubes over the whole turbine
    - ``tsr = 2.0`` tip speed ratio of the turbine
    - ``re = 60000.0`` Reynolds number of the turbine
    - ``solidity = 0.1`` solidity of the turbine
    - ``epsilon = 0.01`` accuracy of the induction factor
    """

    def __init__(self, aerofoil, n_streamtubes=50, tsr=2.0, re=60000.0,
                 solidity=0.1, epsilon=0.01):
        self.aerofoil = aerofoil
        self.n_streamtubes = n_streamtubes
        self.tsr = tsr
        self.re = re
        self.solidity = solidity
        self.epsilon = epsilon

    @property
    def n_streamtubes(self):
        """Number of streamtubes, always even"""
        return self._n_streamtubes

    @n_streamtubes.setter
    def n_streamtubes(self, n):
        n = int(n)
        if n % 2 != 0:
            n += 1
        self._n_streamtubes = n

    def set_n_streamtubes(self, n):
        """Set the number of streamtubes, odd values are rounded up"""
        self.n_streamtubes = n
        return self

    def set_tsr(self, tsr):
        """Set the tip speed ratio"""
        self.tsr = float(tsr)
        return self

    def set_re(self, re):
        """Set the turbine Reynolds number"""
        self.re = float(re)
        return self

    def set_solidity(self, solidity):
        """Set the turbine solidity"""
        self.solidity = float(solidity)
        return self

    def set_epsilon(self, epsilon):
        """Set the accuracy of the induction factor"""
        self.epsilon = float(epsilon)
        return self

    def get_case(self):
        """Return the VAWTCase for the current settings"""
        return VAWTCase(self.re, self.tsr, self.solidity, self.aerofoil)

    def solve(self, beta):
        """Solve all streamtubes for a pitch angle

        Args:
            beta (double or callable): Constant pitch angle in radians, or a
                function returning the pitch angle for a position theta
        Return:
            solution (VAWTSolution): Solved turbine
        """
        beta_fn = beta if callable(beta) else (lambda theta: beta)
        epsilon = self.epsilon

        def solve_pair(case, theta_up, theta_down):
            beta_up = beta_fn(theta_up)
            beta_down = beta_fn(theta_down)
            a_up = StreamTube(theta_up, beta_up, 0.0).solve_a(case, epsilon)
            a_down = StreamTube(theta_down, beta_down, a_up).solve_a(
                case, epsilon)
            return beta_up, beta_down, a_up, a_down

        return self.map_streamtubes(solve_pair)

    def map_streamtubes(self, solve_fn):
        """Iterate over all pairs of up- and downstream streamtubes

        Args:
            solve_fn (callable): ``solve_fn(case, theta_up, theta_down)``
                returning ``(beta_up, beta_down, a_up, a_down)``
        Return:
            solution (VAWTSolution): Solved turbine
        """
        n = self.n_streamtubes
        d_theta = 2.0 * np.pi / n
        theta = d_theta * (np.arange(n) + 0.5)
        beta = np.zeros(n)
        a = np.zeros(n)
        a_0 = np.zeros(n)

        case = self.get_case()
        for i in range(n // 2):
            i_down = n - 1 - i
            beta[i], beta[i_down], a[i], a[i_down] = solve_fn(
                case, theta[i], theta[i_down])
            a_0[i_down] = a[i]

        solution = VAWTSolution(case, n, theta, beta, a, a_0, self.epsilon)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Solved %d streamtubes at tsr = %g: cp = %.4f",
                         n, case.tsr, solution.c_power())
        return solution


class VAWTSolution:
    """Solution of a VAWTSolver run

    Stores the pitch and induction factor of every streamtube; quantities
    between streamtubes are linearly interpolated in theta.
    """

    def __init__(self, case, n_streamtubes, theta, beta, a, a_0, epsilon):
        self.case = case
        self.n_streamtubes = n_streamtubes
        self._epsilon = epsilon
        for k, v in dict(theta=theta, beta=beta, a=a, a_0=a_0).items():
            v = np.array(v, dtype=float)
            v.flags.writeable = False
            setattr(self, '_' + k, v)

    @property
    def epsilon(self):
        """Accuracy of the induction factors"""
        return self._epsilon

    @property
    def thetas(self):
        """Streamtube positions (radians)"""
        return self._theta

    @property
    def betas(self):
        """Pitch angle of every streamtube (radians)"""
        return self._beta

    @property
    def induction_factors(self):
        """Induction factor of every streamtube"""
        return self._a

    @property
    def upstream_induction_factors(self):
        """Upstream induction factor of every streamtube"""
        return self._a_0

    def streamtube(self, i):
        """StreamTubeSolution of the i-th stored streamtube"""
        tube = StreamTube(self._theta[i], self._beta[i], self._a_0[i])
        return StreamTubeSolution(self.case, tube, self._a[i])

    def solution(self, theta):
        """StreamTubeSolution interpolated to position theta"""
        tube = StreamTube(theta, self.beta(theta), self.a_0(theta))
        return StreamTubeSolution(self.case, tube, self.a(theta))

    def c_torque(self):
        """Torque coefficient of the turbine"""
        ct = 0.0
        for i in range(self._theta.size):
            sol = self.streamtube(i)
            ct += sol.c_tan() * sol.w()**2
        return ct * self.case.solidity / self.n_streamtubes

    def c_power(self):
        """Power coefficient of the turbine"""
        return self.c_torque() * self.case.tsr

    def beta(self, theta):
        """Pitch angle at location theta"""
        return float(np.interp(theta, self._theta, self._beta))

    def a(self, theta):
        """Induction factor at location theta"""
        return float(np.interp(theta, self._theta, self._a))

    def a_0(self, theta):
        """Upstream induction factor at location theta"""
        return float(np.interp(theta, self._theta, self._a_0))

    def thrust_error(self, theta):
        """Difference between foil and wind thrust at location theta"""
        return self.solution(theta).thrust_error()

    def c_tan(self, theta):
        """Tangential foil coefficient at location theta"""
        return self.solution(theta).c_tan()

    def w(self, theta):
        """Relative wind speed at the foil at location theta"""
        return self.solution(theta).w()

    def alpha(self, theta):
        """Angle of attack at the foil at location theta"""
        return self.solution(theta).alpha()

    def re(self, theta):
        """Local Reynolds number at the foil at location theta"""
        return self.solution(theta).re()

    def to_dataframe(self):
        """Per streamtube results as a pandas DataFrame"""
        rows = []
        for i in range(self._theta.size):
            sol = self.streamtube(i)
            rows.append(dict(theta=sol.theta(), beta=sol.beta(), a=sol.a(),
                             a_0=sol.a_0(), w=sol.w(), alpha=sol.alpha(),
                             re=sol.re(), thrust_error=sol.thrust_error(),
                             foil_thrust=sol.foil_thrust(),
                             c_tan=sol.c_tan(), c_norm=sol.c_norm()))
        return pd.DataFrame(rows)
