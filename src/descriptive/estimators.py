from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import pandas as pd
from tqdm import tqdm

from descriptive.correlation.pearson import ZeroVariancePolicy, pearson_corr
from descriptive.covariance.sample import sample_covariance
from descriptive.errors import InsufficientSamplesError
from descriptive.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class MatrixEstimator(Protocol):
    """Any estimator that turns a window of observations into a P x P matrix."""

    def estimate(self, window: pd.DataFrame) -> pd.DataFrame: ...


class SampleCovarianceEstimator:
    """Standard sample covariance matrix."""

    def estimate(self, window: pd.DataFrame) -> pd.DataFrame:
        return sample_covariance(window)


@dataclass
class PearsonCorrelationEstimator:
    """
    Pearson correlation matrix of a window, derived from its sample covariance.

    Parameters
    ----------
    zero_variance : {"raise", "nan"}, default "raise"
        Handling of constant columns, see ``correlation_matrix``.
    """

    zero_variance: ZeroVariancePolicy = "raise"

    def estimate(self, window: pd.DataFrame) -> pd.DataFrame:
        return pearson_corr(sample_covariance(window), zero_variance=self.zero_variance)


def estimate_rolling(
    df: pd.DataFrame,
    estimator: MatrixEstimator,
    window: int,
    step: int = 1,
    progress: bool = False,
) -> dict:
    """
    Apply ``estimator`` to trailing windows of ``window`` rows.

    Windows end every ``step`` rows, the first one ending at row ``window``.
    Each result is keyed by the index label of the last row in its window.

    Parameters
    ----------
    df : DataFrame (T x P)
        Observations, index = time (or any ordered label).
    estimator : MatrixEstimator
    window : int
        Rows per window, at least 2.
    step : int, default 1
        Rows between consecutive window ends.
    progress : bool, default False
        Show a tqdm progress bar.

    Returns
    -------
    dict
        Window end label -> estimated matrix (DataFrame).
    """
    if window < 2:
        raise InsufficientSamplesError(window)
    if step < 1:
        raise ValueError(f"step must be a positive integer, got {step}")

    ends = range(window, len(df) + 1, step)
    if not ends:
        logger.warning(
            "only %d rows available, no window of %d rows", len(df), window
        )

    results = {}
    for end in tqdm(ends, disable=not progress):
        window_df = df.iloc[end - window : end]
        results[df.index[end - 1]] = estimator.estimate(window_df)
    return results
