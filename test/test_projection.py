# test/test_projection.py
import numpy as np
import pytest

from shotprofile.core import analyze
from shotprofile.render import Viewport, project


def test_default_viewport_geometry():
    vp = Viewport()
    assert vp.inner == (30.0, 20.0, 580.0, 370.0)
    assert vp.x_scale(15.0)(15.0) == 580.0
    assert vp.y_scale("temperature")(20.0) == 370.0
    assert vp.y_scale("pressure")(12.0) == 20.0


def test_viewport_rejects_bad_inner_and_domains():
    with pytest.raises(ValueError):
        Viewport(inner=(30.0, 20.0, 700.0, 370.0))
    with pytest.raises(ValueError):
        Viewport(domains={"temperature": (20.0, 100.0)})


def test_project_temperature(two_temperatures):
    pixels = project(analyze(two_temperatures))

    assert set(pixels) == {"temperature", "pressure", "flow"}
    temp = pixels["temperature"]
    assert temp.shape == (3, 4)
    # x: 0..15 s -> 30..580 px
    assert np.allclose(temp[:, 0], [30.0, 30.0 + 550.0 * 10 / 15, 30.0 + 550.0 * 10 / 15])
    # y: 90 C -> 370 - 350 * 70 / 80
    assert temp[0, 1] == pytest.approx(370.0 - 350.0 * 70.0 / 80.0)
    assert pixels["pressure"].shape == (0, 4)


def test_project_with_custom_viewport(pressure_then_flow):
    vp = Viewport(
        width=100.0,
        height=100.0,
        inner=(0.0, 0.0, 100.0, 100.0),
        domains={"temperature": (0.0, 100.0), "pressure": (0.0, 10.0), "flow": (0.0, 10.0)},
    )
    pixels = project(analyze(pressure_then_flow), vp)
    # pressure 9 bar held from 0 to 10 s of 30 s
    assert np.allclose(pixels["pressure"][1], [0.0, 10.0, 100.0 / 3.0, 10.0])


def test_axes_from_viewport():
    vp = Viewport()
    assert vp.x_axis(30.0).ticks() == [10.0, 20.0, 30.0]
    assert vp.y_axis().line() == (0.0, 0.0, 0.0, -350.0)
