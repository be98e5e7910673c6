class DescriptiveStatsError(ValueError):
    """Base class for degenerate or malformed statistical input."""


class InsufficientSamplesError(DescriptiveStatsError):
    """
    Raised when fewer than two observations are available, so the
    unbiased (N - 1) estimator is undefined.
    """

    def __init__(self, n_samples: int):
        self.n_samples = n_samples
        super().__init__(
            f"At least 2 observations are required, got {n_samples}."
        )


class ZeroVarianceError(DescriptiveStatsError):
    """Raised when a variable has zero variance and its correlation is undefined."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(
            f"Variable {index} has zero variance; correlation is undefined."
        )


class DimensionMismatchError(DescriptiveStatsError):
    """Raised for a non-square, asymmetric or wrongly shaped matrix or series."""

    def __init__(self, message: str, shape: tuple | None = None):
        self.shape = shape
        super().__init__(message)


class InvalidCovarianceError(DescriptiveStatsError):
    """Raised for a covariance matrix with a negative variance on its diagonal."""

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(
            f"Variance of variable {index} is negative ({value!r})."
        )
