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

import contextlib
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
import warnings

from .histograms import (
    DEFAULT_PERCENTILES,
    bin_samples,
    marginal_density,
    percentile_title,
    percentiles,
)
from .layers import LayerKind
from .layout import GridLayout
from .levels import contour_levels, credible_levels, mask_weights
from .options import (
    APPEARANCE_DEFAULTS,
    CONTOUR_DEFAULTS,
    HIST2D_DEFAULTS,
    HIST_DEFAULTS,
    PERCENTILES_DEFAULTS,
    SCATTER_DEFAULTS,
    merge_options,
    without,
)
from .scatter_filter import filter_outside
from .series import Series
from .utils.checks import Checks
from .utils.plot_logger import PlotLogger


LIMIT_FACTOR = 1.05
NON_RENDERER_KEYS = ("nbins", "seriestype")


class _PairStats(object):
    """
    Binned statistics shared by the 2D layers of one series in one cell.
    """

    def __init__(self, xs, ys, nbins, logger, histfunc=bin_samples):
        self.xs = xs
        self.ys = ys
        self.centers_x, self.centers_y, self.grid = histfunc(xs, ys, nbins)
        logger._write_hist_to_log(self.centers_x, self.grid)

        self.thresholds = None
        if self.grid.sum() > 0:
            self.thresholds = credible_levels(self.grid)
            logger._write_levels_to_log(self.thresholds)
        else:
            warnings.warn(
                "No samples to bin for this pair; skipping contours.",
                UserWarning,
            )

    @property
    def has_levels(self):
        return self.thresholds is not None


def corner(
    data,
    labels=None,
    title="",
    plotcontours=True,
    plotscatter=True,
    plotpercentiles=DEFAULT_PERCENTILES,
    filterscatter=True,
    hist_kwargs=None,
    hist2d_kwargs=None,
    contour_kwargs=None,
    scatter_kwargs=None,
    percentiles_kwargs=None,
    appearance=None,
    lens=None,
    lens_kwargs=None,
    bonusplot=None,
    scale=1,
    display=4,
    fig=None,
    debug=False,
    histfunc=bin_samples,
    **fig_kwargs,
):
    """
    Draws a corner (pair) plot: 1D marginals on the diagonal and 2D joint
    distributions below it, with axis limits shared per column and row.

    :param data: a table (dict of arrays, DataFrame, structured array or any
        source with a registered adapter), a Series or a list of Series
    :param labels: display label per column; defaults to the column names
    :type labels: list of str
    :param title: figure title
    :param plotcontours: draw credible contours on 2D panels (tables only;
        a Series carries its own flags)
    :param plotscatter: draw samples on 2D panels
    :param plotpercentiles: percentile ranks marked on 1D panels
    :param filterscatter: drop samples inside the outermost contour
    :param hist_kwargs: options for 1D histograms ("nbins" plus matplotlib
        step() keywords)
    :param hist2d_kwargs: options for 2D histograms ("nbins", "seriestype"
        and matplotlib pcolormesh() keywords)
    :param contour_kwargs: matplotlib contour() keywords
    :param scatter_kwargs: matplotlib scatter() keywords
    :param percentiles_kwargs: matplotlib axvline() keywords
    :param appearance: axis formatting options, see APPEARANCE_DEFAULTS
    :param lens: a column name or a pair of column names drawn in a larger
        auxiliary panel
    :param lens_kwargs: option overrides for the lens panel
    :param bonusplot: callable(ax, geometry) drawing a custom auxiliary
        panel; ignored when lens is given
    :param scale: layout scale factor
    :param display: figure size multiplier
    :param fig: figure to draw into; a new one is created when None
    :param debug: log per-cell geometry and statistics at DEBUG level
    :param histfunc: binning hook called as histfunc(values, nbins) and
        histfunc(values_a, values_b, nbins); see bin_samples

    :returns: matplotlib Figure
    """
    series_list = _as_series_list(
        data,
        plotcontours=plotcontours,
        plotscatter=plotscatter,
        plotpercentiles=plotpercentiles,
        filterscatter=filterscatter,
        hist_kwargs=hist_kwargs,
        hist2d_kwargs=hist2d_kwargs,
        contour_kwargs=contour_kwargs,
        scatter_kwargs=scatter_kwargs,
        percentiles_kwargs=percentiles_kwargs,
        histfunc=histfunc,
    )
    columns = series_list[0].columns
    labels = _check_labels(labels, columns)

    logger = PlotLogger(__name__, debug=debug)
    appearance = merge_options(APPEARANCE_DEFAULTS, appearance)
    shared = {
        LayerKind.HIST: merge_options(HIST_DEFAULTS, hist_kwargs),
        LayerKind.PERCENTILES: merge_options(PERCENTILES_DEFAULTS, percentiles_kwargs),
        LayerKind.HIST2D: merge_options(HIST2D_DEFAULTS, hist2d_kwargs),
        LayerKind.CONTOUR: merge_options(CONTOUR_DEFAULTS, contour_kwargs),
        LayerKind.SCATTER: merge_options(SCATTER_DEFAULTS, scatter_kwargs),
    }

    layout = GridLayout(len(columns), scale=scale)
    limits = axis_limits(series_list, columns)
    three_d = any(series.three_d for series in series_list)

    if fig is None:
        fig = plt.figure(figsize=layout.figure_size(display), **fig_kwargs)
    if title:
        fig.suptitle(title)

    with _style_context(appearance):
        for row, col in layout.cells():
            geometry = layout.cell_geometry(row, col)
            logger._write_cell_to_log(
                row, col, layout.subplot_index(row, col), geometry
            )
            is_2d = row != col
            ax = fig.add_axes(
                layout.figure_rect(geometry),
                projection="3d" if three_d and is_2d else None,
            )
            _draw_cell(
                ax,
                series_list,
                columns[row - 1],
                columns[col - 1],
                limits,
                shared,
                logger,
                first_cell=(row, col) == (1, 1),
            )
            _decorate(
                ax,
                layout.axis_visibility(row, col, three_d=three_d),
                series_list[0],
                labels[row - 1],
                labels[col - 1],
                columns[row - 1],
                is_2d,
                appearance,
            )

        _draw_auxiliary(
            fig,
            layout,
            series_list,
            columns,
            labels,
            limits,
            shared,
            appearance,
            lens,
            lens_kwargs,
            bonusplot,
            logger,
            three_d,
        )

    if any(series.label for series in series_list):
        fig.legend(loc="upper right")

    return fig


pairplot = corner


def axis_limits(series_list, columns):
    """
    Axis limits per column from the union of every series' extrema, with the
    span widened by LIMIT_FACTOR about its center.
    """
    limits = {}
    for name in columns:
        extrema = [s.extrema(name) for s in series_list if s.extrema(name)]
        if not extrema:
            low, high = 0.0, 1.0
        else:
            low = min(e[0] for e in extrema)
            high = max(e[1] for e in extrema)
            if low == high:
                low, high = low - 0.5, high + 0.5
        center = (low + high) / 2
        half_span = (high - low) / 2 * LIMIT_FACTOR
        limits[name] = (center - half_span, center + half_span)
    return limits


def _as_series_list(data, **series_kwargs):
    if isinstance(data, Series):
        return [data]
    if isinstance(data, (list, tuple)) and data and all(
        isinstance(s, Series) for s in data
    ):
        columns = data[0].columns
        for series in data[1:]:
            missing = set(columns) - set(series.columns)
            if missing:
                raise ValueError(f"series is missing columns {sorted(missing)}")
        return list(data)
    return [Series(data, **series_kwargs)]


def _check_labels(labels, columns):
    if labels is None:
        labels = [str(name) for name in columns]
    labels = list(labels)
    if len(labels) != len(columns):
        Checks._raise_length_error("labels", len(columns))
    if not all(Checks._is_ascii(label) for label in labels):
        warnings.warn(
            "Non-ascii labels detected. Some renderers require passing these "
            "using LaTeX escapes, e.g. \\alpha instead of α",
            UserWarning,
        )
    return labels


def _style_context(appearance):
    if appearance.get("seaborn_style"):
        return sns.axes_style(appearance["seaborn_style"])
    return contextlib.nullcontext()


def _draw_cell(
    ax, series_list, row_name, col_name, limits, shared, logger,
    first_cell=False, extra=None, is_2d=None,
):
    if is_2d is None:
        is_2d = row_name != col_name
    for series in series_list:
        if is_2d:
            _draw_pair(ax, series, row_name, col_name, shared, logger, extra)
        else:
            _draw_marginal(ax, series, col_name, shared, first_cell, extra)

    ax.set_xlim(limits[col_name])
    if is_2d:
        ax.set_ylim(limits[row_name])


def _draw_marginal(ax, series, name, shared, first_cell=False, extra=None):
    values = series.column(name)
    hist_options = merge_options(
        shared[LayerKind.HIST], series.hist_kwargs, extra
    )
    for layer in series.layers_1d():
        cell = {}
        if first_cell and layer.kind is LayerKind.HIST and series.label:
            cell = {"label": series.label}
        _DRAW_1D[layer.kind](
            ax, series, values, hist_options, shared, cell, layer.kwargs
        )


def _draw_pair(ax, series, row_name, col_name, shared, logger, extra=None):
    hist2d_options = merge_options(
        shared[LayerKind.HIST2D], series.hist2d_kwargs, extra
    )
    stats = _PairStats(
        series.column(col_name),
        series.column(row_name),
        hist2d_options["nbins"],
        logger,
        histfunc=series.histfunc,
    )
    for layer in series.layers_2d():
        _DRAW_2D[layer.kind](
            ax, series, stats, hist2d_options, shared, logger, layer.kwargs
        )


def _draw_hist(ax, series, values, hist_options, shared, cell, call):
    centers, weights = series.histfunc(values, hist_options["nbins"])
    options = without(merge_options(hist_options, cell, call), *NON_RENDERER_KEYS)
    ax.step(centers, weights, where="mid", **options)


def _draw_percentiles(ax, series, values, hist_options, shared, cell, call):
    if values.size == 0 or not series.plotpercentiles:
        return
    options = merge_options(
        shared[LayerKind.PERCENTILES], series.percentiles_kwargs, cell, call
    )
    for value in percentiles(values, series.plotpercentiles):
        ax.axvline(value, **without(options, "title"))


def _draw_margin_density(ax, series, values, hist_options, shared, cell, call):
    x, density = marginal_density(values)
    nbins = hist_options["nbins"]
    bin_width = np.ptp(values) / nbins if values.size else 0.0
    options = merge_options({"color": hist_options.get("color")}, cell, call)
    ax.plot(x, density * values.size * bin_width, **options)


def _draw_hist2d(ax, series, stats, hist2d_options, shared, logger, call):
    options = without(merge_options(hist2d_options, call), *NON_RENDERER_KEYS)
    if series.three_d:
        X, Y = np.meshgrid(stats.centers_x, stats.centers_y)
        ax.plot_wireframe(X, Y, stats.grid, **without(options, "cmap"))
        return

    show_scatter = series.has_layer(LayerKind.SCATTER)
    if stats.has_levels:
        weights = mask_weights(stats.grid, stats.thresholds[0], show_scatter)
    else:
        weights = np.array(stats.grid, dtype=float)
    ax.pcolormesh(
        stats.centers_x, stats.centers_y, weights, shading="nearest", **options
    )


def _draw_hexbin(ax, series, stats, hist2d_options, shared, logger, call):
    options = merge_options(
        {"cmap": hist2d_options.get("cmap"), "gridsize": _gridsize(hist2d_options)},
        call,
    )
    ax.hexbin(stats.xs, stats.ys, **options)


def _draw_contour(ax, series, stats, hist2d_options, shared, logger, call):
    if series.three_d or not stats.has_levels:
        return
    options = merge_options(
        shared[LayerKind.CONTOUR], series.contour_kwargs, call
    )
    ax.contour(
        stats.centers_x,
        stats.centers_y,
        stats.grid,
        levels=contour_levels(stats.grid, stats.thresholds),
        **options,
    )


def _draw_contourf(ax, series, stats, hist2d_options, shared, logger, call):
    if series.three_d or not stats.has_levels:
        return
    options = merge_options({"cmap": hist2d_options.get("cmap")}, call)
    ax.contourf(
        stats.centers_x,
        stats.centers_y,
        stats.grid,
        levels=contour_levels(stats.grid, stats.thresholds),
        **options,
    )


def _draw_scatter(ax, series, stats, hist2d_options, shared, logger, call):
    options = merge_options(
        shared[LayerKind.SCATTER], series.scatter_kwargs, call
    )
    if series.three_d:
        ax.scatter(stats.xs, stats.ys, np.zeros(stats.xs.size), **options)
        return

    xs, ys = stats.xs, stats.ys
    if series.filterscatter and stats.has_levels:
        xs, ys = filter_outside(
            xs,
            ys,
            stats.centers_x,
            stats.centers_y,
            stats.grid,
            stats.thresholds[0],
        )
        logger._write_filter_to_log(stats.xs.size, xs.size)
    ax.scatter(xs, ys, **options)


def _gridsize(hist2d_options):
    nbins = hist2d_options["nbins"]
    return tuple(nbins) if np.ndim(nbins) else nbins


_DRAW_1D = {
    LayerKind.HIST: _draw_hist,
    LayerKind.PERCENTILES: _draw_percentiles,
    LayerKind.MARGIN_DENSITY: _draw_margin_density,
}

_DRAW_2D = {
    LayerKind.HIST2D: _draw_hist2d,
    LayerKind.HEXBIN: _draw_hexbin,
    LayerKind.CONTOUR: _draw_contour,
    LayerKind.CONTOURF: _draw_contourf,
    LayerKind.SCATTER: _draw_scatter,
}


def _decorate(
    ax, visibility, series, row_label, col_label, row_name, is_2d, appearance,
):
    if visibility["title"]:
        values = series.column(row_name)
        title = row_label
        if series.plotpercentiles and values.size:
            title = percentile_title(row_label, values)
        ax.set_title(title, fontsize=appearance["titlefontsize"])

    if visibility["xlabel"]:
        ax.set_xlabel(col_label)
    if visibility["ylabel"] and is_2d:
        ax.set_ylabel(row_label)

    _apply_appearance(ax, appearance)
    ax.tick_params(
        axis="x", labelbottom=visibility["xticklabels"]
    )
    if not is_2d:
        ax.set_yticks([])
    else:
        ax.tick_params(axis="y", labelleft=visibility["yticklabels"])


def _apply_appearance(ax, appearance):
    ax.grid(appearance["grid"])
    ax.tick_params(
        axis="x",
        direction=appearance["tick_direction"],
        labelrotation=appearance["xrotation"],
    )
    ax.tick_params(
        axis="y",
        direction=appearance["tick_direction"],
        labelrotation=appearance["yrotation"],
    )


def _draw_auxiliary(
    fig, layout, series_list, columns, labels, limits, shared, appearance,
    lens, lens_kwargs, bonusplot, logger, three_d,
):
    if lens is not None:
        kind = "lens"
    elif bonusplot is not None:
        kind = "bonus"
    else:
        return

    geometry = layout.auxiliary_geometry(kind)
    if geometry[2] <= 0 or geometry[3] <= 0:
        warnings.warn(
            f"No room for a {kind} panel on a grid of size {layout.n}; "
            "omitting it.",
            UserWarning,
        )
        return
    rect = layout.figure_rect(geometry)

    if kind == "bonus":
        bonusplot(fig.add_axes(rect), geometry)
        return

    names = _lens_columns(lens, columns)
    if names is None:
        logger._write_skip_to_log(f"lens {lens!r} not found; omitting panel")
        return

    row_name, col_name, is_2d = names
    ax = fig.add_axes(rect, projection="3d" if three_d and is_2d else None)
    _draw_cell(
        ax, series_list, row_name, col_name, limits, shared, logger,
        extra=lens_kwargs, is_2d=is_2d,
    )

    title = labels[columns.index(row_name)]
    values = series_list[0].column(row_name)
    if is_2d:
        title = f"{title} vs. {labels[columns.index(col_name)]}"
    elif series_list[0].plotpercentiles and values.size:
        title = percentile_title(title, values)
    ax.set_title(title, fontsize=appearance["titlefontsize"])
    _apply_appearance(ax, appearance)
    if not is_2d:
        ax.set_yticks([])


def _lens_columns(lens, columns):
    """
    Resolves a lens into (row_name, col_name, is_2d). A lens naming a column
    is a 1D panel; any pair of column names is a 2D panel, even a repeated
    name. Returns None when the lens matches neither form.
    """
    try:
        if lens in columns:
            return lens, lens, False
    except (TypeError, ValueError):
        pass
    if isinstance(lens, str):
        return None
    try:
        row_name, col_name = lens
    except (TypeError, ValueError):
        return None
    if row_name in columns and col_name in columns:
        return row_name, col_name, True
    return None
