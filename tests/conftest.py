import numpy as np
import pytest

from vawt_dmst import AerofoilBuilder

#: Reynolds number -> stall angle (degrees) of the synthetic profile
STALL_DEG = {40000.0: 10.0, 80000.0: 12.0, 160000.0: 14.0}


def synthetic_polar(stall_deg, aoa_max=30.0):
    """Rows (aoa, cl, cd) of a symmetric profile with a sharp stall"""
    aoa = np.arange(0.0, aoa_max + 1.0, 1.0)
    cl = np.where(aoa <= stall_deg, 0.1 * aoa,
                  0.1 * stall_deg - 0.04 * (aoa - stall_deg))
    cd = 0.01 + 0.0004 * aoa**2
    return np.column_stack([aoa, cl, cd])


@pytest.fixture
def polars():
    return {re: synthetic_polar(stall) for re, stall in STALL_DEG.items()}


@pytest.fixture
def builder(polars):
    bld = AerofoilBuilder()
    for re in (80000.0, 40000.0, 160000.0):
        bld.load_data(polars[re], re)
    return bld.symmetric(True)


@pytest.fixture
def aerofoil(builder):
    return builder.build()


@pytest.fixture
def corrected_builder(polars):
    bld = AerofoilBuilder()
    for re in (80000.0, 40000.0, 160000.0):
        bld.load_data(polars[re], re)
    return (bld.symmetric(True)
            .set_aspect_ratio(12.8)
            .request_aspect_ratio_correction(True))


@pytest.fixture
def corrected_aerofoil(corrected_builder):
    return corrected_builder.build()
