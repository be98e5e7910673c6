from typing import Literal

import numpy as np
import pandas as pd

from descriptive.covariance.sample import sample_covariance
from descriptive.covariance.utils import mirror_upper
from descriptive.errors import (
    DimensionMismatchError,
    InvalidCovarianceError,
    ZeroVarianceError,
)
from descriptive.logging import get_logger

logger = get_logger(__name__)

ZeroVariancePolicy = Literal["raise", "nan"]

SYMMETRY_RTOL = 1e-10
SYMMETRY_ATOL = 1e-12


def _check_covariance(cov) -> np.ndarray:
    if isinstance(cov, pd.DataFrame):
        C = cov.to_numpy(dtype=np.float64, copy=True)
    else:
        C = np.array(cov, dtype=np.float64)

    if C.ndim != 2 or C.shape[0] != C.shape[1]:
        raise DimensionMismatchError(
            f"Covariance matrix must be square, got shape {C.shape}.",
            shape=C.shape,
        )
    if C.shape[0] == 0:
        raise DimensionMismatchError("Covariance matrix is empty.", shape=C.shape)
    if not np.allclose(C, C.T, rtol=SYMMETRY_RTOL, atol=SYMMETRY_ATOL, equal_nan=True):
        raise DimensionMismatchError(
            "Covariance matrix is not symmetric.", shape=C.shape
        )

    var = np.diag(C)
    negative = np.flatnonzero(var < 0)
    if negative.size:
        i = int(negative[0])
        raise InvalidCovarianceError(i, float(var[i]))
    return C


def correlation_matrix(
    cov, zero_variance: ZeroVariancePolicy = "raise"
) -> np.ndarray:
    """
    Pearson correlation matrix derived from a covariance matrix:

        ρ_ij = Σ_ij / sqrt(Σ_ii * Σ_jj)

    Parameters
    ----------
    cov : array-like or DataFrame (P x P)
        Symmetric covariance matrix.
    zero_variance : {"raise", "nan"}
        What to do with a variable whose variance is exactly zero.
        "raise" raises ZeroVarianceError naming the first such variable.
        "nan" fills that variable's row and column (diagonal included)
        with NaN.

    Returns
    -------
    rho : ndarray (P x P)
        Exactly symmetric, diagonal exactly 1.0 for every variable with
        positive variance and NaN otherwise, off-diagonals clipped to [-1, 1].
    """
    if zero_variance not in ("raise", "nan"):
        raise ValueError(f"Unknown zero_variance policy '{zero_variance}'")

    C = _check_covariance(cov)
    var = np.diag(C)

    degenerate = np.flatnonzero(var == 0)
    if degenerate.size:
        if zero_variance == "raise":
            raise ZeroVarianceError(int(degenerate[0]))
        logger.warning(
            "zero variance for variables %s; their correlations are NaN",
            degenerate.tolist(),
        )

    # scale by each sd separately; var_i * var_j is never formed
    sd = np.sqrt(var)
    with np.errstate(divide="ignore", invalid="ignore"):
        rho = C / sd[:, None] / sd[None, :]

    rho = mirror_upper(np.clip(rho, -1.0, 1.0))
    rho[np.diag_indices_from(rho)] = np.where(var > 0, 1.0, np.nan)
    rho[degenerate, :] = np.nan
    rho[:, degenerate] = np.nan
    return rho


def pearson_corr(
    cov: pd.DataFrame, zero_variance: ZeroVariancePolicy = "raise"
) -> pd.DataFrame:
    """
    Pearson correlation matrix keeping the labels of ``cov``.
    """
    rho = correlation_matrix(cov, zero_variance=zero_variance)
    return pd.DataFrame(rho, index=cov.index, columns=cov.columns)


def sample_correlation(
    df: pd.DataFrame, zero_variance: ZeroVariancePolicy = "raise"
) -> pd.DataFrame:
    return pearson_corr(sample_covariance(df), zero_variance=zero_variance)
