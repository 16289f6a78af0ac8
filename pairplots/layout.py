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


MM_PER_INCH = 25.4
AUXILIARY_KINDS = ("lens", "bonus")


class GridLayout(object):
    """
    Geometry of a triangular grid of n x n cells plus an optional auxiliary
    panel. All sizes are in layout units (millimetres at scale=1) measured
    from the top-left corner of the canvas; rows and columns are 1-based.
    """

    CELL_WIDTH = 40
    CELL_HEIGHT = 40
    CELL_PAD = 1
    PAD_TOP = 20
    PAD_LEFT = 20
    PAD_RIGHT = 0
    PAD_BOTTOM = 10
    PAD_BONUS_EVEN = 20
    PAD_BONUS_ODD = 5

    def __init__(self, n, scale=1):
        """
        :param n: number of variables (grid rows and columns)
        :type n: int
        :param scale: multiplier applied to every size and padding constant
        :type scale: int or float
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"n must be an integer, got {n!r}")
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        if scale <= 0:
            raise ValueError(f"scale must be > 0, got {scale}")
        self._n = int(n)
        self._scale = scale

    @property
    def n(self):
        return self._n

    @property
    def scale(self):
        return self._scale

    @property
    def w(self):
        return self.CELL_WIDTH * self._scale

    @property
    def h(self):
        return self.CELL_HEIGHT * self._scale

    @property
    def p(self):
        return self.CELL_PAD * self._scale

    @property
    def pad_top(self):
        return self.PAD_TOP * self._scale

    @property
    def pad_left(self):
        return self.PAD_LEFT * self._scale

    @property
    def pad_right(self):
        return self.PAD_RIGHT * self._scale

    @property
    def pad_bottom(self):
        return self.PAD_BOTTOM * self._scale

    @property
    def pad_bonus(self):
        pad = self.PAD_BONUS_EVEN if self._n % 2 == 0 else self.PAD_BONUS_ODD
        return pad * self._scale

    @property
    def num_cells(self):
        return self._n * (self._n + 1) // 2

    def cells(self):
        """
        Yields (row, col) for every allocated cell, row by row. Upper
        triangle cells (row < col) are never yielded.
        """
        for row in range(1, self._n + 1):
            for col in range(1, row + 1):
                yield row, col

    def cell_geometry(self, row, col):
        """
        :returns: (x, y, width, height) of cell (row, col)
        """
        self._check_cell(row, col)
        x = (col - 1) * (self.w + self.p) + self.pad_left
        y = (row - 1) * (self.h + self.p) + self.pad_top
        return x, y, self.w, self.h

    def subplot_index(self, row, col):
        self._check_cell(row, col)
        return row * (row - 1) // 2 + col

    def canvas_size(self):
        width = self.pad_left + (self.w + self.p) * self._n + self.pad_right
        height = self.pad_top + (self.h + self.p) * self._n + self.pad_bottom
        return width, height

    def figure_size(self, display=4):
        """
        Canvas size in inches, enlarged by the "display" multiplier.
        """
        width, height = self.canvas_size()
        return width * display / MM_PER_INCH, height * display / MM_PER_INCH

    def auxiliary_geometry(self, kind):
        """
        Geometry of the single auxiliary panel, placed right of the middle
        diagonal band. A "bonus" panel also keeps pad_bonus clear of the
        right canvas edge.

        :param kind: "lens", "bonus" or None
        :returns: (x, y, width, height) or None
        """
        if kind is None:
            return None
        if kind not in AUXILIARY_KINDS:
            raise ValueError(f"kind must be one of {AUXILIARY_KINDS} or None")

        full_width, full_height = self.canvas_size()
        nspan = int(np.floor(np.mean(np.arange(1, self._n + 1))))

        x = nspan * (self.w + self.p) + self.pad_bonus + self.pad_left
        y = self.pad_top
        width = full_width - x
        if kind == "bonus":
            width -= self.pad_bonus
        height = (
            full_height
            - self.pad_bottom
            - self.pad_top
            - nspan * (self.h + self.p)
            - self.pad_bonus
        )
        return x, y, width, height

    def axis_visibility(self, row, col, three_d=False):
        """
        Which labels a cell shows: x labels on the bottom row, y labels on
        the first column below the diagonal, titles on the diagonal. In 3D
        mode every panel formats its own axes.
        """
        self._check_cell(row, col)
        show_x = three_d or row == self._n
        show_y = three_d or (col == 1 and row > 1)
        return {
            "xlabel": show_x,
            "xticklabels": show_x,
            "ylabel": show_y,
            "yticklabels": show_y,
            "title": row == col,
        }

    def figure_rect(self, geometry):
        """
        Converts a top-left (x, y, width, height) geometry into the
        bottom-left figure fraction rectangle matplotlib expects.
        """
        x, y, width, height = geometry
        full_width, full_height = self.canvas_size()
        return (
            x / full_width,
            1 - (y + height) / full_height,
            width / full_width,
            height / full_height,
        )

    def _check_cell(self, row, col):
        if not (1 <= col <= self._n and 1 <= row <= self._n):
            raise ValueError(
                f"cell ({row}, {col}) is outside a grid of size {self._n}"
            )
        if row < col:
            raise ValueError(
                f"cell ({row}, {col}) is in the upper triangle and is never "
                "allocated"
            )
