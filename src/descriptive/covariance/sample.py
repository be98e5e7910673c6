import numpy as np
import pandas as pd

from descriptive.covariance.utils import as_sample_matrix, mirror_upper
from descriptive.errors import DimensionMismatchError, InsufficientSamplesError
from descriptive.logging import get_logger

logger = get_logger(__name__)


def covariance_matrix(x) -> np.ndarray:
    """
    Unbiased sample covariance matrix of an (N x P) sample matrix.

        Σ_ij = sum_k (x_ki - mean_i) * (x_kj - mean_j) / (N - 1)

    Two passes: column means first, then the centred cross-products, which
    keeps precision for data whose mean is large relative to its spread.

    Parameters
    ----------
    x : array-like or DataFrame (N x P)
        Rows are observations, columns are variables. A 1-D input is one
        variable.

    Returns
    -------
    Sigma : ndarray (P x P)
        Exactly symmetric; independent of ``x``.

    Raises
    ------
    InsufficientSamplesError
        If N < 2.
    DimensionMismatchError
        If ``x`` is not 1-D/2-D or has no columns.
    """
    data = as_sample_matrix(x)
    n_obs, n_vars = data.shape
    logger.debug("covariance of %d observations x %d variables", n_obs, n_vars)

    means = data.mean(axis=0)
    centered = data - means
    Sigma = centered.T @ centered / (n_obs - 1)
    return mirror_upper(Sigma)


def covariance(x, y) -> float:
    """
    Sample covariance of two equally long series (N - 1 denominator).
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.ndim != 1 or y.ndim != 1:
        raise DimensionMismatchError(
            "covariance expects two 1-D series.", shape=(x.shape, y.shape)
        )
    if x.size != y.size:
        raise DimensionMismatchError(
            f"Series lengths differ: {x.size} != {y.size}.",
            shape=(x.shape, y.shape),
        )
    if x.size < 2:
        raise InsufficientSamplesError(x.size)

    return float(np.dot(x - x.mean(), y - y.mean()) / (x.size - 1))


def sample_covariance(df: pd.DataFrame) -> pd.DataFrame:
    """
    Sample covariance matrix labelled with the columns of ``df``.
    """
    cols = df.columns
    Sigma = covariance_matrix(df)
    return pd.DataFrame(Sigma, index=cols, columns=cols)
