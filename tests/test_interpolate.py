import numpy as np
import pytest

from vawt_dmst.interpolate import BilinearSurface, linear_interpolator


@pytest.fixture
def surface():
    x, y = np.meshgrid([0.0, 1.0, 3.0], [0.0, 2.0], indexing='ij')
    return BilinearSurface(x.ravel(), y.ravel(), (x + 10.0 * y).ravel())


def test_exact_on_nodes(surface):
    assert surface(1.0, 2.0) == pytest.approx(21.0)
    assert surface(3.0, 0.0) == pytest.approx(3.0)


def test_bilinear_between_nodes(surface):
    assert surface(2.0, 1.0) == pytest.approx(12.0)


def test_clamped_outside(surface):
    assert surface(-5.0, 1.0) == pytest.approx(10.0)
    assert surface(5.0, 9.0) == pytest.approx(23.0)


def test_array_query(surface):
    z = surface(np.array([0.0, 1.0]), 2.0)
    np.testing.assert_allclose(z, [20.0, 21.0])


def test_non_rectangular_grid():
    with pytest.raises(ValueError):
        BilinearSurface([0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [1.0, 2.0, 3.0])


def test_linear_interpolator_clamps():
    fn = linear_interpolator([0.0, 1.0, 2.0], [0.0, 10.0, 30.0])
    assert fn(1.5) == pytest.approx(20.0)
    assert fn(-1.0) == pytest.approx(0.0)
    assert fn(3.0) == pytest.approx(30.0)


def test_nan_propagates(surface):
    assert np.isnan(surface(np.nan, 1.0))
    assert np.isnan(surface(1.0, np.nan))
