"""Plotting helpers (rendered off-screen with the Agg backend)."""

import math

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import pytest

from complexnum import ComplexNumber
from complexnum.complex_plot import (
    MIN_SPAN,
    animate_sequence,
    as_complex_number,
    axis_span,
    frame_title,
    plot_points,
)


class TestCoercion:
    def test_accepted_inputs(self):
        z = ComplexNumber(1, 2)
        assert as_complex_number(z) is z
        for value, parts in (((3, 4), (3.0, 4.0)), (2 - 1j, (2.0, -1.0)), (5, (5.0, 0.0))):
            w = as_complex_number(value)
            assert (w.real, w.imaginary) == parts

    def test_rejected_inputs(self):
        with pytest.raises(TypeError):
            as_complex_number("1+2i")
        with pytest.raises(ValueError):
            as_complex_number((1, 2, 3))


def test_axis_span_ignores_non_finite():
    seq = [ComplexNumber(math.nan, math.inf), ComplexNumber(0.5, 0)]
    assert axis_span(seq) == MIN_SPAN
    assert axis_span([ComplexNumber(-3, 2)]) == 3.0


def test_frame_title():
    assert frame_title(3, ComplexNumber(1, -2)) == "t = 3  |  z = +1.000-2.000i"


def test_plot_points():
    ax = plot_points([(3, 4), 1j, 2, ComplexNumber(-1, -1)])
    assert ax.get_xlim() == pytest.approx((-4.4, 4.4))
    assert ax.get_ylim() == pytest.approx((-4.4, 4.4))
    assert list(ax.lines[0].get_xdata()) == [3.0, 0.0, 2.0, -1.0]
    assert list(ax.lines[0].get_ydata()) == [4.0, 1.0, 0.0, -1.0]
    assert ax.get_xlabel() == "Re"


def test_plot_points_into_existing_axes():
    _, ax = plt.subplots()
    assert plot_points([1j], ax=ax, title="roots") is ax
    assert ax.get_title() == "roots"


def test_empty_sequence():
    with pytest.raises(ValueError):
        plot_points([])
    with pytest.raises(ValueError):
        animate_sequence([], show=False)


def test_animate_sequence():
    step = ComplexNumber.from_polar(1.0, math.pi / 8)
    seq = [ComplexNumber.REAL_UNIT.copy()]
    for _ in range(15):
        seq.append(seq[-1] * step)

    _, ax = plt.subplots()
    anim = animate_sequence(seq, interval=5, ax=ax, show=False)
    assert isinstance(anim, animation.FuncAnimation)
    assert len(ax.lines) == 2
    assert ax.get_title() == "Complex number animation"
    assert ax.get_xlim() == pytest.approx((-1.1, 1.1))
