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


TOP_LEVEL_EPSILON = 1e-4
DUPLICATE_NUDGE = 1e-4


def default_mass_fractions():
    """
    Probability mass enclosed by the 0.5, 1.0, 1.5 and 2.0 sigma regions of
    a 2D Gaussian.
    """
    return 1.0 - np.exp(-0.5 * np.arange(0.5, 2.1, 0.5) ** 2)


def credible_levels(grid, mass_fractions=None):
    """
    Computes highest density region thresholds for a 2D histogram. For each
    mass fraction m the threshold is the smallest bin weight w such that the
    bins with weight >= w together hold at least a fraction m of the total
    weight.

    :param grid: 2D histogram weights
    :type grid: 2D array
    :param mass_fractions: enclosed mass fractions, each in (0, 1); defaults
        to default_mass_fractions()
    :type mass_fractions: 1D array-like

    :returns: strictly increasing thresholds, one per mass fraction
    """
    if mass_fractions is None:
        mass_fractions = default_mass_fractions()
    mass_fractions = np.atleast_1d(np.asarray(mass_fractions, dtype=float))
    if np.any(mass_fractions <= 0) or np.any(mass_fractions >= 1):
        raise ValueError("mass fractions must be in (0, 1)")

    flat = np.sort(np.asarray(grid, dtype=float).ravel())[::-1]
    if flat.size == 0 or flat.sum() <= 0:
        raise ValueError("weight grid has no mass; cannot compute levels")
    if np.any(flat < 0):
        raise ValueError("weight grid must be non-negative")

    cumulative_mass = np.cumsum(flat)
    cumulative_mass /= cumulative_mass[-1]

    idx = np.searchsorted(cumulative_mass, mass_fractions, side="left")
    idx = np.clip(idx, 0, flat.size - 1)
    thresholds = np.sort(flat[idx])

    return _separate_duplicates(thresholds)


def contour_levels(grid, thresholds):
    """
    Level boundaries for filled contours; the top boundary sits just above
    the grid maximum so the highest bin is strictly enclosed.
    """
    top = np.max(grid) * (1 + TOP_LEVEL_EPSILON)
    return np.concatenate(([0.0], thresholds, [top]))


def mask_weights(grid, threshold, enabled=True):
    masked = np.array(grid, dtype=float)
    if enabled:
        masked[masked <= threshold] = np.nan
    return masked


def _separate_duplicates(thresholds):
    duplicates = np.diff(thresholds) == 0
    if np.any(duplicates):
        warnings.warn("Too few points to create valid contours", UserWarning)
    while np.any(duplicates):
        thresholds[np.where(duplicates)[0][0]] *= 1.0 - DUPLICATE_NUDGE
        thresholds.sort()
        duplicates = np.diff(thresholds) == 0
    return thresholds
