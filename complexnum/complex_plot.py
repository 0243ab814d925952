"""
Draw sequences of complex values in the 2-D plane.

``plot_points`` scatters a whole sequence at once; ``animate_sequence`` plays
it back one sample per frame, leaving a trail behind the moving point.
"""
import logging
import math
import numbers
from typing import Iterable, List, Tuple, Union

import matplotlib.animation as animation
import matplotlib.pyplot as plt

from .complex_number import ComplexNumber

logger = logging.getLogger(__name__)

# ---------- configuration ----------
DEFAULT_INTERVAL_MS = 200      # delay between animation frames
AXIS_MARGIN = 0.1              # fraction of the span added around the data
MIN_SPAN = 1.0                 # never zoom in further than the unit circle
POINT_STYLE = "ro"
TRAIL_STYLE = "b-"
TRAIL_ALPHA = 0.5

ComplexLike = Union[ComplexNumber, complex, Tuple[float, float], float, int]


def as_complex_number(value: ComplexLike) -> ComplexNumber:
    """Accept a ComplexNumber, Python ``complex``, ``(x, y)`` tuple or real number."""
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, tuple):
        if len(value) != 2:
            raise ValueError(f"Point tuples need (x, y), got {len(value)} values")
        return ComplexNumber(*value)
    if isinstance(value, numbers.Real):
        return ComplexNumber.with_real(value)
    if isinstance(value, numbers.Complex):
        return ComplexNumber.from_complex(value)
    raise TypeError(f"Cannot plot {type(value).__name__} as a complex value")


def _collect(sequence: Iterable[ComplexLike]) -> List[ComplexNumber]:
    seq = [as_complex_number(z) for z in sequence]
    if not seq:
        raise ValueError("Nothing to plot: the sequence is empty")
    return seq


def axis_span(seq: List[ComplexNumber]) -> float:
    """Largest finite |component| in ``seq``, at least MIN_SPAN."""
    parts = [abs(p) for z in seq for p in (z.real, z.imaginary) if math.isfinite(p)]
    return max(parts + [MIN_SPAN])


def frame_title(frame: int, z: ComplexNumber) -> str:
    return f"t = {frame}  |  z = {z:+.3f}"


def _prepare_axes(ax, span: float, title: str) -> None:
    margin = AXIS_MARGIN * span
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.3)


def plot_points(sequence: Iterable[ComplexLike], *, ax=None, title: str = "Complex plane"):
    """Scatter every value of ``sequence`` and return the Axes."""
    seq = _collect(sequence)
    if ax is None:
        _, ax = plt.subplots()
    span = axis_span(seq)
    logger.debug("plotting %d points, span %.3g", len(seq), span)
    _prepare_axes(ax, span, title)
    ax.plot([z.real for z in seq], [z.imaginary for z in seq], POINT_STYLE, markersize=4)
    return ax


def animate_sequence(
    sequence: Iterable[ComplexLike],
    *,
    interval: int = DEFAULT_INTERVAL_MS,
    ax=None,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex-number samples in the 2-D plane.

    Parameters
    ----------
    sequence : iterable of `ComplexNumber`, Python `complex`, (x, y) tuples or reals
    interval : delay between frames in **ms**
    ax       : Axes to draw into; a new figure is made when omitted
    show     : call ``plt.show()`` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – keep a reference to it, or save() it.
    """
    seq = _collect(sequence)
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    span = axis_span(seq)
    logger.debug("animating %d frames at %d ms, span %.3g", len(seq), interval, span)
    _prepare_axes(ax, span, "Complex number animation")

    point, = ax.plot([], [], POINT_STYLE, markersize=6)
    trail, = ax.plot([], [], TRAIL_STYLE, alpha=TRAIL_ALPHA, linewidth=1)

    history_x: List[float] = []
    history_y: List[float] = []

    def init():
        history_x.clear()
        history_y.clear()
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        z = seq[frame]
        history_x.append(z.real)
        history_y.append(z.imaginary)

        point.set_data([z.real], [z.imaginary])
        trail.set_data(history_x, history_y)
        ax.set_title(frame_title(frame, z))
        return point, trail

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(seq),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    step = ComplexNumber.from_polar(1.0, math.pi / 180)
    o: List[ComplexNumber] = [ComplexNumber.REAL_UNIT.copy()]
    for _ in range(1, 360):
        o.append(o[-1] * step)
    animate_sequence(o, interval=1)
