import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from pairplots import Layer, Series, corner


if __name__ == "__main__":

    rng = np.random.default_rng(0)
    mean = np.array([2.0, 3.5, -1.0])
    cov = np.array([[0.3, 0.2, 0.0], [0.2, 0.5, -0.1], [0.0, -0.1, 0.2]])

    posterior = pd.DataFrame(
        rng.multivariate_normal(mean, cov, size=5000),
        columns=["slope", "intercept", "offset"],
    )
    prior = {
        name: rng.uniform(m - 2, m + 2, size=2000)
        for name, m in zip(posterior.columns, mean)
    }

    corner(
        posterior,
        labels=[r"m", r"b", r"\delta"],
        title="linear model posterior",
        lens=("intercept", "slope"),
    )
    plt.savefig("corner.png")

    series = [
        Series(
            prior,
            label="prior",
            layers=[Layer("hist", color="0.6"), Layer("hexbin", cmap="Blues")],
        ),
        Series(posterior, label="posterior", scatter_kwargs={"color": "C3"}),
    ]
    corner(series)
    plt.savefig("corner_prior_vs_posterior.png")
