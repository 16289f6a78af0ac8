"""
Notices:
Copyright 2018 United States Government as represented by the Administrator of
the National Aeronautics and Space Administration. No copyright is claimed in
the United States under Title 17, U.S. Code. All Other Rights Reserved.

Disclaimers
No Warranty: THE SUBJECT SOFTWARE IS PROVIDED "AS IS" WITHOUT ANY WARRANTY OF
ANY KIND, EITHER EXPRessED, IMPLIED, OR STATUTORY, INCLUDING, BUT NOT LIMITED
TO, ANY WARRANTY THAT THE SUBJECT SOFTWARE WILL CONFORM TO SPECIFICATIONS, ANY
IMPLIED WARRANTIES OF MERCHANTABILITY, FITNess FOR A PARTICULAR PURPOSE, OR
FREEDOM FROM INFRINGEMENT, ANY WARRANTY THAT THE SUBJECT SOFTWARE WILL BE ERROR
FREE, OR ANY WARRANTY THAT DOCUMENTATION, IF PROVIDED, WILL CONFORM TO THE
SUBJECT SOFTWARE. THIS AGREEMENT DOES NOT, IN ANY MANNER, CONSTITUTE AN
ENDORSEMENT BY GOVERNMENT AGENCY OR ANY PRIOR RECIPIENT OF ANY RESULTS,
RESULTING DESIGNS, HARDWARE, SOFTWARE PRODUCTS OR ANY OTHER APPLICATIONS
RESULTING FROM USE OF THE SUBJECT SOFTWARE.  FURTHER, GOVERNMENT AGENCY
DISCLAIMS ALL WARRANTIES AND LIABILITIES REGARDING THIRD-PARTY SOFTWARE, IF
PRESENT IN THE ORIGINAL SOFTWARE, AND DISTRIBUTES IT "AS IS."

Waiver and Indemnity:  RECIPIENT AGREES TO WAIVE ANY AND ALL CLAIMS AGAINST THE
UNITED STATES GOVERNMENT, ITS CONTRACTORS AND SUBCONTRACTORS, AS WELL AS ANY
PRIOR RECIPIENT.  IF RECIPIENT'S USE OF THE SUBJECT SOFTWARE RESULTS IN ANY
LIABILITIES, DEMANDS, DAMAGES, EXPENSES OR LOSSES ARISING FROM SUCH USE,
INCLUDING ANY DAMAGES FROM PRODUCTS BASED ON, OR RESULTING FROM, RECIPIENT'S
USE OF THE SUBJECT SOFTWARE, RECIPIENT SHALL INDEMNIFY AND HOLD HARMLess THE
UNITED STATES GOVERNMENT, ITS CONTRACTORS AND SUBCONTRACTORS, AS WELL AS ANY
PRIOR RECIPIENT, TO THE EXTENT PERMITTED BY LAW.  RECIPIENT'S SOLE REMEDY FOR
ANY SUCH MATTER SHALL BE THE IMMEDIATE, UNILATERAL TERMINATION OF THIS
AGREEMENT.
"""

import numpy as np
import warnings

from scipy.stats import gaussian_kde


DEFAULT_PERCENTILES = (15, 50, 84)
TITLE_PERCENTILES = (16, 50, 84)


def histogram_1d(values, nbins=20):
    """
    Bins a single sample column into "nbins" equal width bins spanning the
    observed range.

    :param values: sample column
    :type values: 1D array-like
    :param nbins: number of bins
    :type nbins: int

    :returns: bin centers and bin weights, both of length nbins
    """
    values = _as_column(values)
    _check_nbins(nbins)
    _warn_if_degenerate(values, "values")

    weights, edges = np.histogram(values, bins=nbins)
    centers = edges[:-1] + np.diff(edges) / 2
    return centers, weights


def histogram_2d(values_a, values_b, nbins=32):
    """
    Bins paired sample columns into a 2D grid. Grid rows index the bins of
    "values_b" and grid columns index the bins of "values_a", so the grid
    has shape (len(centers_b), len(centers_a)).

    :param values_a: sample column along the horizontal axis
    :type values_a: 1D array-like
    :param values_b: sample column along the vertical axis
    :type values_b: 1D array-like
    :param nbins: number of bins for both axes or a pair (nbins_a, nbins_b)
    :type nbins: int or tuple of int

    :returns: centers_a, centers_b, grid
    """
    values_a = _as_column(values_a)
    values_b = _as_column(values_b)
    if values_a.size != values_b.size:
        raise ValueError(
            "paired columns must have equal length: "
            f"{values_a.size} != {values_b.size}"
        )

    nbins_a, nbins_b = _split_nbins(nbins)
    _warn_if_degenerate(values_a, "values_a")
    _warn_if_degenerate(values_b, "values_b")

    edges_a = _edges(values_a, nbins_a)
    edges_b = _edges(values_b, nbins_b)
    grid, _, _ = np.histogram2d(values_b, values_a, bins=[edges_b, edges_a])

    centers_a = edges_a[:-1] + np.diff(edges_a) / 2
    centers_b = edges_b[:-1] + np.diff(edges_b) / 2
    return centers_a, centers_b, grid


def bin_samples(*args):
    """
    Default binning hook: bin_samples(values, nbins) dispatches to
    histogram_1d and bin_samples(values_a, values_b, nbins) to histogram_2d.
    Custom hooks passed as "histfunc" must follow the same call forms and
    return values.
    """
    if len(args) == 2:
        return histogram_1d(*args)
    if len(args) == 3:
        return histogram_2d(*args)
    raise TypeError(
        "bin_samples takes (values, nbins) or (values_a, values_b, nbins); "
        f"got {len(args)} arguments"
    )


def percentiles(values, ranks=DEFAULT_PERCENTILES):
    """
    Linearly interpolated percentiles of a sorted copy of "values"; ranks
    are given in percent.
    """
    ranks = np.asarray(ranks, dtype=float)
    if ranks.size == 0:
        return np.array([])
    if np.any(ranks < 0) or np.any(ranks > 100):
        raise ValueError("percentile ranks must be in [0, 100]")

    sorted_values = np.sort(_as_column(values))
    if sorted_values.size == 0:
        raise ValueError("cannot compute percentiles of an empty column")
    return np.percentile(sorted_values, ranks)


def percentile_title(label, values):
    low, med, high = percentiles(values, TITLE_PERCENTILES)
    return "$%s = %.2f^{+%.2f}_{-%.2f}$" % (label, med, high - med, med - low)


def marginal_density(values, npoints=100):
    """
    Gaussian kernel density estimate of a sample column evaluated on an even
    grid over its range.
    """
    values = _as_column(values)
    if values.size < 2 or np.ptp(values) == 0:
        warnings.warn(
            "Cannot estimate a density from fewer than two distinct values; "
            "returning zero density.",
            UserWarning,
        )
        center = values[0] if values.size else 0.0
        x = np.linspace(center - 0.5, center + 0.5, npoints)
        return x, np.zeros(npoints)

    x = np.linspace(values.min(), values.max(), npoints)
    return x, gaussian_kde(values).pdf(x)


def _as_column(values):
    values = np.asarray(values, dtype=float)
    if values.ndim != 1:
        values = values.squeeze()
        if values.ndim != 1:
            raise ValueError("Sample column must be 1D or must squeeze to 1D")
    return values


def _check_nbins(nbins):
    if isinstance(nbins, bool) or not isinstance(nbins, (int, np.integer)):
        raise TypeError(f"nbins must be an integer, got {nbins!r}")
    if nbins < 1:
        raise ValueError(f"nbins must be >= 1, got {nbins}")


def _split_nbins(nbins):
    if np.ndim(nbins) == 0:
        _check_nbins(nbins)
        return nbins, nbins
    if len(nbins) != 2:
        raise ValueError("nbins must be an integer or a pair of integers")
    for n in nbins:
        _check_nbins(n)
    return tuple(nbins)


def _edges(values, nbins):
    return np.histogram_bin_edges(values, bins=nbins)


def _warn_if_degenerate(values, name):
    if values.size == 0:
        warnings.warn(
            f"{name} is empty; zero-range axis, bin width is undefined.",
            UserWarning,
        )
    elif values.min() == values.max():
        warnings.warn(
            f"{name} is constant ({values[0]}); zero-range axis, bin width "
            "is undefined.",
            UserWarning,
        )
