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
import pandas as pd

from .layers import Layer, LayerKind, default_layers
from .histograms import DEFAULT_PERCENTILES, bin_samples
from .utils.checks import Checks


_ADAPTERS = []


def register_adapter(predicate, adapter):
    """
    Registers a table adapter by capability. Adapters are tried most recent
    first; the first whose predicate accepts a source converts it.

    :param predicate: returns True for sources the adapter understands
    :type predicate: callable
    :param adapter: converts a source into a mapping of column name to
        numeric sequence
    :type adapter: callable
    """
    if not callable(predicate) or not callable(adapter):
        raise TypeError("predicate and adapter must both be callable")
    _ADAPTERS.insert(0, (predicate, adapter))


def as_table(source):
    """
    Converts a tabular source into an ordered dict of column name to 1D
    numeric array. Columns are referenced, never modified.
    """
    for predicate, adapter in _ADAPTERS:
        if predicate(source):
            return _validate_table(adapter(source))
    raise TypeError(
        "You must supply data in a tabular format, e.g. a dict of arrays, a "
        f"pandas DataFrame or a structured array; got {type(source)}"
    )


def _validate_table(mapping):
    table = {}
    for name, values in mapping.items():
        column = np.asarray(values)
        if not Checks._is_1D_numeric(column):
            raise ValueError(f'column "{name}" must be a 1D numeric sequence')
        table[name] = column

    if not table:
        raise ValueError("table must have at least one column")
    lengths = {column.size for column in table.values()}
    if len(lengths) > 1:
        raise ValueError(f"columns of one table must have equal length: {lengths}")
    return table


def _is_structured_array(source):
    return isinstance(source, np.ndarray) and source.dtype.names is not None


def _has_param_dict(source):
    return Checks._is_mapping(getattr(source, "param_dict", None))


register_adapter(Checks._is_mapping, lambda source: source)
register_adapter(_has_param_dict, lambda source: source.param_dict)
register_adapter(
    lambda source: isinstance(source, pd.DataFrame),
    lambda source: {name: source[name].to_numpy() for name in source.columns},
)
register_adapter(
    _is_structured_array,
    lambda source: {name: source[name] for name in source.dtype.names},
)


class Series(Checks):
    """
    One data source drawn on the grid together with its own layer stack and
    style overrides. Several series can share one figure.
    """

    def __init__(
        self,
        table,
        label=None,
        plotcontours=True,
        plotscatter=True,
        plotpercentiles=DEFAULT_PERCENTILES,
        filterscatter=True,
        hist_kwargs=None,
        hist2d_kwargs=None,
        contour_kwargs=None,
        scatter_kwargs=None,
        percentiles_kwargs=None,
        layers=None,
        histfunc=bin_samples,
    ):
        """
        :param table: any source accepted by as_table
        :param label: legend label for the series
        :type label: str or None
        :param plotpercentiles: percentile ranks drawn on 1D panels; empty
            to disable
        :type plotpercentiles: list of int or float
        :param layers: explicit layer stack; built from the plot* flags when
            not given
        :type layers: list of Layer
        :param histfunc: binning hook called as histfunc(values, nbins) on
            1D panels and histfunc(values_a, values_b, nbins) on 2D panels
        :type histfunc: callable
        """
        if not self._is_string_or_none(label):
            self._raise_type_error("label", "a string or None")
        if not callable(histfunc):
            self._raise_type_error("histfunc", "callable")

        self._table = as_table(table)
        self._label = label
        self._plotpercentiles = tuple(plotpercentiles or ())
        self._filterscatter = filterscatter
        self._hist_kwargs = dict(hist_kwargs or {})
        self._hist2d_kwargs = dict(hist2d_kwargs or {})
        self._contour_kwargs = dict(contour_kwargs or {})
        self._scatter_kwargs = dict(scatter_kwargs or {})
        self._percentiles_kwargs = dict(percentiles_kwargs or {})
        self._histfunc = histfunc

        if layers is None:
            layers = default_layers(
                plotcontours=plotcontours,
                plotscatter=plotscatter,
                plotpercentiles=len(self._plotpercentiles) > 0,
            )
        self._layers = self._check_layers(layers)

    @property
    def table(self):
        return self._table

    @property
    def label(self):
        return self._label

    @property
    def columns(self):
        return tuple(self._table.keys())

    @property
    def layers(self):
        return list(self._layers)

    @property
    def plotpercentiles(self):
        return self._plotpercentiles

    @property
    def filterscatter(self):
        return self._filterscatter

    @property
    def hist_kwargs(self):
        return dict(self._hist_kwargs)

    @property
    def hist2d_kwargs(self):
        return dict(self._hist2d_kwargs)

    @property
    def contour_kwargs(self):
        return dict(self._contour_kwargs)

    @property
    def scatter_kwargs(self):
        return dict(self._scatter_kwargs)

    @property
    def percentiles_kwargs(self):
        return dict(self._percentiles_kwargs)

    @property
    def histfunc(self):
        return self._histfunc

    @property
    def three_d(self):
        return self._hist2d_kwargs.get("seriestype") == "wireframe"

    def column(self, name):
        return self._table[name]

    def extrema(self, name):
        column = self._table[name]
        if column.size == 0:
            return None
        return np.min(column), np.max(column)

    def layers_1d(self):
        return [layer for layer in self._layers if layer.is_1d]

    def layers_2d(self):
        return [layer for layer in self._layers if not layer.is_1d]

    def has_layer(self, kind):
        return any(layer.kind == LayerKind(kind) for layer in self._layers)

    def _check_layers(self, layers):
        for layer in layers:
            if not isinstance(layer, Layer):
                self._raise_type_error("layers", "a list of Layer objects")
        return list(layers)
