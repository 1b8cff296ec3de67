import numpy as np
import pytest

from vawt_dmst.transforms import Rotation2D, rot_vec


def test_quarter_turn():
    x, y = Rotation2D(np.pi / 2)((1.0, 0.0))
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_inverse():
    rot = Rotation2D(0.7)
    vec = (0.3, -1.2)
    np.testing.assert_allclose(rot.inverse_transform(rot(vec)), vec)
    np.testing.assert_allclose(rot.inverted()(vec), rot.inverse_transform(vec))


def test_composition():
    rot = Rotation2D(0.4) * Rotation2D(0.5)
    assert rot.angle == pytest.approx(0.9)
    np.testing.assert_allclose(rot((1.0, 2.0)), rot_vec(1.0, 2.0, 0.9))


def test_preserves_length():
    x, y = rot_vec(3.0, 4.0, 1.234)
    assert np.hypot(x, y) == pytest.approx(5.0)
