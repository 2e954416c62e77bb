""" Shared fixtures for tests """

import logging

import numpy as np
import pytest

from cpchop.deck import GridDeck


@pytest.fixture(autouse = True)
def capture_logs(caplog):
    """Always capture log messages from cpchop"""

    caplog.set_level(logging.DEBUG, logger = "cpchop")


def _layered_deck(nx, ny, nz, top = 1000.0, thickness = 10.0, with_properties = True):
    # flat layers of constant thickness on vertical pillars 100 m apart; depth increasing with k
    i, j = np.meshgrid(np.arange(nx + 1), np.arange(ny + 1))
    coord = np.zeros((ny + 1, nx + 1, 6))
    coord[..., 0] = coord[..., 3] = 100.0 * i
    coord[..., 1] = coord[..., 4] = 100.0 * j
    coord[..., 2] = top
    coord[..., 5] = top + nz * thickness
    planes = top + thickness * (np.arange(nz).reshape((nz, 1)) + np.array([0.0, 1.0]))
    zcorn = np.broadcast_to(planes.reshape((2 * nz, 1, 1)), (2 * nz, 2 * ny, 2 * nx))
    fields = {'COORD': coord, 'ZCORN': zcorn}
    if with_properties:
        n = nx * ny * nz
        actnum = np.ones(n, dtype = int)
        actnum[min(1, n - 1)] = 0
        fields['ACTNUM'] = actnum
        fields['PORO'] = 0.1 + 0.001 * np.arange(n)
        fields['PERMX'] = 100.0 + np.arange(n)
        fields['PERMY'] = 100.0 + np.arange(n)
        fields['PERMZ'] = 10.0 + np.arange(n)
        fields['SATNUM'] = 1 + np.arange(n) // (nx * ny)
    return GridDeck(dimensions = (nx, ny, nz), fields = fields)


@pytest.fixture
def layered_deck():
    """Returns a function building a GridDeck of flat 10 m thick layers starting at depth 1000 m"""

    return _layered_deck


@pytest.fixture
def small_deck():
    """Returns a 3 x 2 x 4 GridDeck with all six chopper property keywords"""

    return _layered_deck(3, 2, 4)


@pytest.fixture
def relief_zcorn():
    """Returns ZCORN for a 1 x 1 x 3 grid with uneven layer boundaries"""

    return np.array([
        0.0, 0.0, 0.0, 5.0, 10.0, 10.0, 10.0, 12.0,  # layer 0: top, base
        10.0, 10.0, 10.0, 12.0, 20.0, 20.0, 20.0, 20.0,  # layer 1
        20.0, 20.0, 20.0, 20.0, 30.0, 30.0, 28.0, 30.0  # layer 2
    ])
