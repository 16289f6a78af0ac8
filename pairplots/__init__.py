from .plotter import corner, pairplot, axis_limits
from .series import Series, as_table, register_adapter
from .layers import Layer, LayerKind
from .layout import GridLayout
from .histograms import bin_samples, histogram_1d, histogram_2d, percentiles
from .levels import credible_levels, contour_levels
from .scatter_filter import filter_outside

__version__ = "0.1.0"
