import numpy as np
import pandas as pd

from descriptive.correlation.pearson import pearson_corr
from descriptive.covariance.sample import sample_covariance

# 6 observations of 5 variables
A = pd.DataFrame(
    np.array(
        [
            [1.4022225, -0.04625344, 1.26176112, -1.8394428, 0.7182637],
            [-0.2230975, 0.91561987, 1.17086252, 0.2282348, 0.0690674],
            [0.6939930, 1.94611387, -0.82939259, 1.0905923, 0.1458883],
            [-0.4050039, 0.18818663, -0.29040783, 0.6937185, 0.4664052],
            [0.6587918, -0.10749210, 3.27376532, 0.5141217, 0.7691778],
            [-2.5275280, 0.64942255, 0.07506224, -1.0787524, 1.6217606],
        ]
    ),
    columns=["x1", "x2", "x3", "x4", "x5"],
)


def main():
    print("Covariance and correlation matrix of a sample data set.")

    cov = sample_covariance(A)
    cor = pearson_corr(cov)

    with pd.option_context("display.float_format", "{:.16f}".format, "display.width", 200):
        print("covariance:")
        print(cov)
        print("correlation:")
        print(cor)

    return cov, cor


if __name__ == "__main__":
    main()
