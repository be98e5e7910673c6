import numpy as np
import pandas as pd

from descriptive.errors import DimensionMismatchError, InsufficientSamplesError


def as_sample_matrix(x) -> np.ndarray:
    """
    Copy observations into a float64 (N x P) array.

    A 1-D input is a single variable observed N times and becomes (N x 1).
    The returned array never shares memory with ``x``.
    """
    if isinstance(x, pd.DataFrame):
        data = x.to_numpy(dtype=np.float64, copy=True)
    else:
        data = np.array(x, dtype=np.float64)

    if data.ndim == 1:
        data = data.reshape(-1, 1)
    if data.ndim != 2:
        raise DimensionMismatchError(
            f"Sample matrix must be 1-D or 2-D, got {data.ndim} dimensions.",
            shape=data.shape,
        )
    if data.shape[1] == 0:
        raise DimensionMismatchError(
            "Sample matrix has no variables (0 columns).", shape=data.shape
        )
    if data.shape[0] < 2:
        raise InsufficientSamplesError(data.shape[0])
    return data


def mirror_upper(a: np.ndarray) -> np.ndarray:
    """
    Symmetric matrix built from the upper triangle (diagonal included) of ``a``.
    """
    return np.triu(a) + np.triu(a, 1).T


def corr_to_cov(corr: pd.DataFrame, vol: pd.Series) -> pd.DataFrame:
    """
    Build a covariance matrix from a correlation matrix:

        Σ_ij = ρ_ij * σ_i * σ_j

    Parameters
    ----------
    corr : DataFrame (P x P)
        Correlation matrix.
    vol : Series (P,)
        Standard deviations (σ_i), matched to ``corr`` by label.

    Returns
    -------
    cov_df : DataFrame (P x P)
    """
    vol = vol.reindex(corr.index)
    if vol.isna().any():
        missing = list(vol.index[vol.isna()])
        raise DimensionMismatchError(
            f"No standard deviation given for {missing}.", shape=corr.shape
        )
    D = np.diag(vol.to_numpy(dtype=np.float64))
    Sigma = mirror_upper(D @ corr.to_numpy(dtype=np.float64) @ D)
    return pd.DataFrame(Sigma, index=corr.index, columns=corr.columns)
