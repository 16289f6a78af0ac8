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

import contourpy
import numpy as np

from matplotlib.path import Path


BOUNDARY_TOLERANCE = 1e-9


def trace_contours(axis_x, axis_y, grid, level):
    """
    Traces the iso-weight lines of "grid" at a single level. The grid is
    indexed grid[j, i] with j along axis_y and i along axis_x, matching the
    output of histogram_2d.

    :returns: list of closed rings, each an (M, 2) array whose last point
        repeats its first
    """
    grid = np.asarray(grid, dtype=float)
    axis_x = np.asarray(axis_x, dtype=float)
    axis_y = np.asarray(axis_y, dtype=float)
    if grid.shape != (axis_y.size, axis_x.size):
        raise ValueError(
            "grid shape must be (len(axis_y), len(axis_x)): "
            f"{grid.shape} != {(axis_y.size, axis_x.size)}"
        )
    if min(grid.shape) < 2:
        return []

    generator = contourpy.contour_generator(
        axis_x, axis_y, grid, line_type=contourpy.LineType.Separate
    )
    return [_close(line) for line in generator.lines(level) if len(line) > 0]


def filter_outside(xs, ys, axis_x, axis_y, grid, level):
    """
    Keeps only the points that lie outside every contour ring traced at
    "level". Points on a ring count as inside and are dropped.

    :param xs: point coordinates along axis_x
    :type xs: 1D array-like
    :param ys: point coordinates along axis_y
    :type ys: 1D array-like
    :param level: bin weight of the boundary, usually the lowest credible
        level
    :type level: float

    :returns: the retained xs and ys, in input order
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if xs.shape != ys.shape:
        raise ValueError(f"xs and ys must match: {xs.shape} != {ys.shape}")

    points = np.column_stack((xs, ys))
    outside = np.ones(xs.size, dtype=bool)
    tol = _tolerance(axis_x, axis_y)

    for ring in trace_contours(axis_x, axis_y, grid, level):
        inside = Path(ring).contains_points(points)
        inside |= points_on_ring(points, ring, tol)
        outside &= ~inside

    return xs[outside], ys[outside]


def points_on_ring(points, ring, tol=BOUNDARY_TOLERANCE):
    """
    Flags points lying within "tol" of any segment of "ring".
    """
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    on_ring = np.zeros(points.shape[0], dtype=bool)

    for start, end in zip(ring[:-1], ring[1:]):
        segment = end - start
        length_sq = segment @ segment
        if length_sq == 0:
            t = np.zeros(points.shape[0])
        else:
            t = np.clip((points - start) @ segment / length_sq, 0, 1)
        nearest = start + t[:, None] * segment
        on_ring |= np.hypot(*(points - nearest).T) <= tol

    return on_ring


def _close(line):
    if np.array_equal(line[0], line[-1]):
        return line
    return np.vstack((line, line[:1]))


def _tolerance(axis_x, axis_y):
    span = max(np.ptp(axis_x), np.ptp(axis_y), 1.0)
    return BOUNDARY_TOLERANCE * span
