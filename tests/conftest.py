"""Shared fixtures: deterministic RNG and the 6 x 5 reference data set.

The published covariance of the reference data agrees with its exact
covariance only to about 4e-8, so data-to-matrix checks use
``exact_covariance``; ``expected_covariance`` feeds the correlation step.
"""

import math
import os
from fractions import Fraction

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Seeded from TEST_RNG_SEED (default 0)."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def sample_matrix() -> np.ndarray:
    return np.array(
        [
            [1.4022225, -0.04625344, 1.26176112, -1.8394428, 0.7182637],
            [-0.2230975, 0.91561987, 1.17086252, 0.2282348, 0.0690674],
            [0.6939930, 1.94611387, -0.82939259, 1.0905923, 0.1458883],
            [-0.4050039, 0.18818663, -0.29040783, 0.6937185, 0.4664052],
            [0.6587918, -0.10749210, 3.27376532, 0.5141217, 0.7691778],
            [-2.5275280, 0.64942255, 0.07506224, -1.0787524, 1.6217606],
        ]
    )


@pytest.fixture
def expected_covariance() -> np.ndarray:
    return np.array(
        [
            [1.8914619605066914, -0.0940529762770646, 0.6656689707202647, 0.1769623013404954, -0.4870227666639277],
            [-0.0940529762770646, 0.6002733224811770, -0.7425837392715091, 0.4045117724259264, -0.1735474428635912],
            [0.6656689707202647, -0.7425837392715091, 2.1673062607416513, -0.2506723639944475, 0.0850986167152383],
            [0.1769623013404954, 0.4045117724259264, -0.2506723639944475, 1.3017513547658062, -0.3858916139755872],
            [-0.4870227666639277, -0.1735474428635912, 0.0850986167152383, -0.3858916139755872, 0.3173008375647300],
        ]
    )


@pytest.fixture
def expected_correlation() -> np.ndarray:
    return np.array(
        [
            [1.0, -0.0882671727437672, 0.3287754378466710, 0.1127763235190793, -0.6286585817897393],
            [-0.0882671727437672, 1.0, -0.6510446447124169, 0.4576069637074221, -0.3976565023793239],
            [0.3287754378466710, -0.6510446447124169, 1.0, -0.1492389877846141, 0.1026187567166916],
            [0.1127763235190793, 0.4576069637074221, -0.1492389877846141, 1.0, -0.6004346026136406],
            [-0.6286585817897393, -0.3976565023793239, 0.1026187567166916, -0.6004346026136406, 1.0],
        ]
    )


@pytest.fixture
def exact_covariance(sample_matrix) -> np.ndarray:
    """Two-pass covariance in exact rational arithmetic, rounded once."""
    rows = [[Fraction(v) for v in row] for row in sample_matrix.tolist()]
    n, p = len(rows), len(rows[0])
    means = [sum(row[j] for row in rows) / n for j in range(p)]
    cov = np.empty((p, p))
    for i in range(p):
        for j in range(p):
            s = sum((row[i] - means[i]) * (row[j] - means[j]) for row in rows)
            cov[i, j] = float(s / (n - 1))
    return cov


@pytest.fixture
def exact_correlation(exact_covariance) -> np.ndarray:
    sd = [math.sqrt(v) for v in np.diag(exact_covariance)]
    p = len(sd)
    rho = np.array(
        [[exact_covariance[i, j] / (sd[i] * sd[j]) for j in range(p)] for i in range(p)]
    )
    np.fill_diagonal(rho, 1.0)
    return rho
