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

from enum import Enum


class LayerKind(Enum):
    HIST = "hist"
    PERCENTILES = "percentiles"
    MARGIN_DENSITY = "margin_density"
    HIST2D = "hist2d"
    HEXBIN = "hexbin"
    CONTOUR = "contour"
    CONTOURF = "contourf"
    SCATTER = "scatter"

    @property
    def is_1d(self):
        return self in ONE_D_KINDS


ONE_D_KINDS = frozenset(
    (LayerKind.HIST, LayerKind.PERCENTILES, LayerKind.MARGIN_DENSITY)
)


class Layer(object):
    """
    One visualization layer of a series: a kind plus the style options that
    are passed through to the renderer for that kind.
    """

    def __init__(self, kind, **kwargs):
        self._kind = LayerKind(kind)
        self._kwargs = kwargs

    @property
    def kind(self):
        return self._kind

    @property
    def kwargs(self):
        return dict(self._kwargs)

    @property
    def is_1d(self):
        return self._kind.is_1d

    def __eq__(self, other):
        if not isinstance(other, Layer):
            return NotImplemented
        return self._kind == other._kind and self._kwargs == other._kwargs

    def __repr__(self):
        return f"Layer({self._kind.value!r}, {self._kwargs!r})"


def default_layers(plotcontours=True, plotscatter=True, plotpercentiles=True):
    """
    The layer stack drawn when a series does not provide its own.
    """
    layers = [Layer(LayerKind.HIST)]
    if plotpercentiles:
        layers.append(Layer(LayerKind.PERCENTILES))
    layers.append(Layer(LayerKind.HIST2D))
    if plotscatter:
        layers.append(Layer(LayerKind.SCATTER))
    if plotcontours:
        layers.append(Layer(LayerKind.CONTOUR))
    return layers
