import numpy as np
import pandas as pd
import pytest

from pairplots.histograms import bin_samples
from pairplots.layers import Layer, LayerKind
from pairplots.series import Series, as_table, register_adapter


class FakeParticles:
    def __init__(self, params):
        self._params = params

    @property
    def param_dict(self):
        return dict(self._params)


def test_as_table_from_dict_keeps_order_and_references():
    x = np.array([1.0, 2.0, 3.0])
    table = as_table({"y": [4, 5, 6], "x": x})

    assert list(table) == ["y", "x"]
    assert np.shares_memory(table["x"], x)


def test_as_table_from_dataframe():
    df = pd.DataFrame({"a": [1.0, 2.0], "b": [3.0, 4.0]})

    table = as_table(df)

    assert list(table) == ["a", "b"]
    np.testing.assert_array_equal(table["b"], [3.0, 4.0])


def test_as_table_from_structured_array():
    array = np.array([(1.0, 2), (3.0, 4)], dtype=[("a", float), ("b", int)])

    table = as_table(array)

    np.testing.assert_array_equal(table["a"], [1.0, 3.0])
    np.testing.assert_array_equal(table["b"], [2, 4])


def test_as_table_from_param_dict_container():
    particles = FakeParticles({"a": np.ones(3), "b": np.zeros(3)})

    table = as_table(particles)

    assert list(table) == ["a", "b"]


def test_register_adapter():
    class Chains:
        names = ("m", "c")
        data = np.arange(6.0).reshape(3, 2)

    register_adapter(
        lambda source: isinstance(source, Chains),
        lambda source: dict(zip(source.names, source.data.T)),
    )

    table = as_table(Chains())

    np.testing.assert_array_equal(table["c"], [1.0, 3.0, 5.0])


def test_register_adapter_requires_callables():
    with pytest.raises(TypeError):
        register_adapter("not callable", lambda source: source)


@pytest.mark.parametrize("source", [5, "abc", [1, 2, 3], np.ones((3, 2))])
def test_as_table_rejects_non_tabular(source):
    with pytest.raises(TypeError):
        as_table(source)


@pytest.mark.parametrize(
    "source",
    [
        {},
        {"a": ["x", "y"]},
        {"a": np.ones((2, 2))},
        {"a": [1, 2, 3], "b": [1, 2]},
    ],
)
def test_as_table_rejects_bad_columns(source):
    with pytest.raises(ValueError):
        as_table(source)


def test_series_columns_and_extrema():
    series = Series({"a": [3.0, -1.0, 2.0], "b": [0.0, 0.0, 5.0]})

    assert series.columns == ("a", "b")
    assert series.extrema("a") == (-1.0, 3.0)
    assert series.extrema("b") == (0.0, 5.0)


def test_series_extrema_of_empty_column():
    series = Series({"a": []})

    assert series.extrema("a") is None


def test_series_default_layers():
    series = Series({"a": [1.0, 2.0]})

    assert [layer.kind for layer in series.layers_1d()] == [
        LayerKind.HIST,
        LayerKind.PERCENTILES,
    ]
    assert [layer.kind for layer in series.layers_2d()] == [
        LayerKind.HIST2D,
        LayerKind.SCATTER,
        LayerKind.CONTOUR,
    ]


def test_series_without_percentiles_has_no_percentile_layer():
    series = Series({"a": [1.0, 2.0]}, plotpercentiles=[])

    assert not series.has_layer("percentiles")
    assert series.plotpercentiles == ()


def test_series_explicit_layers():
    layers = [Layer("hist"), Layer("hexbin", gridsize=10)]

    series = Series({"a": [1.0, 2.0]}, layers=layers)

    assert series.layers == layers
    assert series.has_layer(LayerKind.HEXBIN)
    assert not series.has_layer(LayerKind.SCATTER)


def test_series_rejects_bad_layers():
    with pytest.raises(TypeError):
        Series({"a": [1.0]}, layers=["hist"])


def test_series_rejects_bad_label():
    with pytest.raises(TypeError):
        Series({"a": [1.0]}, label=3)


def test_series_three_d():
    series = Series({"a": [1.0]}, hist2d_kwargs={"seriestype": "wireframe"})

    assert series.three_d


def test_series_kwargs_are_copied():
    hist_kwargs = {"color": "red"}
    series = Series({"a": [1.0]}, hist_kwargs=hist_kwargs)

    series.hist_kwargs["color"] = "blue"
    hist_kwargs["color"] = "green"

    assert series.hist_kwargs == {"color": "red"}


def test_series_default_histfunc():
    assert Series({"a": [1.0, 2.0]}).histfunc is bin_samples


def test_series_rejects_non_callable_histfunc():
    with pytest.raises(TypeError):
        Series({"a": [1.0, 2.0]}, histfunc="hist")
