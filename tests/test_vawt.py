import numpy as np
import pytest

from vawt_dmst import VAWTSolver


@pytest.fixture
def solver(aerofoil):
    return VAWTSolver(aerofoil, n_streamtubes=12, tsr=2.5, re=60000.0,
                      solidity=0.2)


def test_defaults(aerofoil):
    solver = VAWTSolver(aerofoil)
    assert solver.n_streamtubes == 50
    assert solver.tsr == 2.0
    assert solver.re == 60000.0
    assert solver.solidity == 0.1
    assert solver.epsilon == 0.01


def test_odd_streamtube_count_is_rounded_up(aerofoil):
    assert VAWTSolver(aerofoil, n_streamtubes=7).n_streamtubes == 8
    assert VAWTSolver(aerofoil).set_n_streamtubes(11).n_streamtubes == 12


def test_fluent_setters(aerofoil):
    solver = (VAWTSolver(aerofoil)
              .set_re(31300.0)
              .set_solidity(0.3525)
              .set_n_streamtubes(72)
              .set_tsr(3.25)
              .set_epsilon(0.005))
    case = solver.get_case()
    assert case.re == 31300.0
    assert case.tsr == 3.25
    assert case.solidity == 0.3525
    assert case.aerofoil is aerofoil
    assert solver.n_streamtubes == 72
    assert solver.epsilon == 0.005


def test_streamtube_layout(solver):
    sol = solver.solve(0.0)
    n = solver.n_streamtubes
    theta = sol.thetas
    np.testing.assert_allclose(theta, (2 * np.arange(n) + 1) * np.pi / n)
    # upwind tubes start from undisturbed wind
    np.testing.assert_array_equal(sol.upstream_induction_factors[:n // 2], 0.0)
    # downwind tubes see the induction of the mirrored upwind tube
    np.testing.assert_array_equal(
        sol.upstream_induction_factors[n // 2:],
        sol.induction_factors[:n // 2][::-1])


def test_solution_is_read_only(solver):
    sol = solver.solve(0.0)
    with pytest.raises(ValueError):
        sol.induction_factors[0] = 0.5


def test_point_queries_exact_on_nodes(solver):
    sol = solver.solve(0.0)
    for i, theta in enumerate(sol.thetas):
        assert sol.a(theta) == sol.induction_factors[i]
        assert sol.a_0(theta) == sol.upstream_induction_factors[i]
        assert sol.beta(theta) == sol.betas[i]
        tube = sol.streamtube(i)
        assert sol.w(theta) == pytest.approx(tube.w())
        assert sol.alpha(theta) == pytest.approx(tube.alpha())
        assert sol.re(theta) == pytest.approx(tube.re())
        assert sol.c_tan(theta) == pytest.approx(tube.c_tan())
        assert sol.thrust_error(theta) == pytest.approx(tube.thrust_error())


def test_point_query_between_nodes(solver):
    sol = solver.solve(0.0)
    t0, t1 = sol.thetas[2:4]
    a0, a1 = sol.induction_factors[2:4]
    assert sol.a(0.5 * (t0 + t1)) == pytest.approx(0.5 * (a0 + a1))


@pytest.mark.parametrize("tsr", [1.0, 2.0, 3.25, 5.0])
def test_zero_solidity_has_no_torque(aerofoil, tsr):
    sol = VAWTSolver(aerofoil, n_streamtubes=8, tsr=tsr,
                     solidity=0.0).solve(0.0)
    assert sol.c_torque() == 0.0
    assert sol.c_power() == 0.0


def test_power_is_torque_times_tsr(solver):
    sol = solver.solve(0.0)
    assert sol.c_power() == pytest.approx(sol.c_torque() * solver.tsr)


def test_torque_from_stored_streamtubes(solver):
    sol = solver.solve(0.0)
    expected = sum(sol.streamtube(i).c_tan() * sol.streamtube(i).w()**2
                   for i in range(sol.n_streamtubes))
    expected *= solver.solidity / solver.n_streamtubes
    assert sol.c_torque() == pytest.approx(expected)


def test_constant_and_callable_pitch_agree(solver):
    const = solver.solve(0.02)
    func = solver.solve(lambda theta: 0.02)
    np.testing.assert_array_equal(const.induction_factors,
                                  func.induction_factors)
    np.testing.assert_array_equal(const.betas, 0.02)


def test_callable_pitch_evaluated_at_each_position(solver):
    seen = []

    def beta(theta):
        seen.append(theta)
        return 0.1 * np.sin(theta)

    sol = solver.solve(beta)
    np.testing.assert_allclose(sorted(seen), sol.thetas)
    np.testing.assert_allclose(sol.betas, 0.1 * np.sin(sol.thetas))


def test_to_dataframe(solver):
    sol = solver.solve(0.0)
    data = sol.to_dataframe()
    assert len(data) == solver.n_streamtubes
    for col in ['theta', 'beta', 'a', 'a_0', 'w', 'alpha', 're',
                'thrust_error', 'foil_thrust', 'c_tan', 'c_norm']:
        assert col in data.columns
    np.testing.assert_array_equal(data['a'], sol.induction_factors)


def test_three_polar_turbine(corrected_aerofoil):
    sol = (VAWTSolver(corrected_aerofoil)
           .set_re(31300.0)
           .set_solidity(0.3525)
           .set_n_streamtubes(72)
           .set_tsr(3.25)
           .solve(0.0))

    assert sol.n_streamtubes == 72
    assert sol.epsilon == 0.01
    a = sol.induction_factors
    assert a.shape == (72,)
    assert np.all(a >= -1.0)
    assert np.all(a <= 1.2)
    assert np.isfinite(sol.c_torque())
    assert np.isfinite(sol.c_power())


def test_coarse_epsilon_does_not_raise(aerofoil):
    # a bracket width of 1 stops bisection at a = 0.5 upwind, which leaves
    # no reference wind speed for the downwind tube
    sol = VAWTSolver(aerofoil, n_streamtubes=8, epsilon=1.0).solve(0.0)
    a = sol.induction_factors
    assert a.shape == (8,)
    np.testing.assert_array_equal(np.abs(a[:4]) <= 2.0, True)
