"""
Live matplotlib rendering of a launch: the trajectory curve, the moving
projectile marker and the timer-based frame scheduler that drives it.
"""
from __future__ import annotations

from collections.abc import Sequence

from matplotlib.axes import Axes
from matplotlib.backend_bases import FigureCanvasBase, TimerBase
from matplotlib.collections import PolyCollection
from matplotlib.lines import Line2D

from projectilelab.core.kinematics import KinematicsResult
from projectilelab.core.sampler import TrajectorySample, axis_bound
from projectilelab.core.scheduler import FrameCallback
from projectilelab.utils.validation import validate_positive

# About one display refresh at 60 Hz
FRAME_INTERVAL_MS = 16

LINE_COLOR = "#4F46E5"
MARKER_COLOR = "#C81E1E"


class TimerScheduler:
    """
    Frame scheduler backed by single-shot canvas timers.

    Callbacks run on the GUI event loop of the canvas, so they never overlap.

    Parameters
    ----------
    canvas : FigureCanvasBase
        Canvas whose backend provides the timers
    interval_ms : int
        Delay before each frame [ms]
    """

    def __init__(self, canvas: FigureCanvasBase, interval_ms: int = FRAME_INTERVAL_MS) -> None:
        validate_positive(interval_ms, "Frame interval")
        self.canvas = canvas
        self.interval_ms = interval_ms

    def request_frame(self, callback: FrameCallback) -> TimerBase:
        timer = self.canvas.new_timer(interval=self.interval_ms)
        timer.single_shot = True
        timer.add_callback(callback)
        timer.start()
        return timer

    def cancel_frame(self, handle: TimerBase) -> None:
        handle.stop()


class TrajectoryRenderer:
    """
    Draws a trajectory and the projectile marker on a matplotlib Axes.

    The curve artists are created on the first :meth:`draw_curve` and
    replaced (old ones removed) on every later call. The marker artist lives
    as long as the renderer.

    Parameters
    ----------
    ax : Axes
        Target axes
    line_color : str
        Colour of the curve and its fill
    marker_color : str
        Colour of the projectile marker
    marker_size : float
        Marker size [pt]
    """

    def __init__(
        self,
        ax: Axes,
        line_color: str = LINE_COLOR,
        marker_color: str = MARKER_COLOR,
        marker_size: float = 6.0,
    ) -> None:
        self.ax = ax
        self.line_color = line_color
        self.curve: Line2D | None = None
        self.fill: PolyCollection | None = None
        self.marker, = ax.plot(
            [], [], "o", color=marker_color, markersize=marker_size, zorder=3
        )

        ax.set_xlabel("Distance (m)", fontsize=14)
        ax.set_ylabel("Height (m)", fontsize=14)
        ax.set_xlim(0, axis_bound(0.0))
        ax.set_ylim(0, axis_bound(0.0))
        ax.grid(True, linestyle=":", alpha=0.6)

    def draw_curve(self, samples: Sequence[TrajectorySample], result: KinematicsResult) -> None:
        """
        Replace the displayed trajectory and rescale the axes.

        Axis limits are the range and peak height rounded up to the next
        multiple of 10 m (at least 10 m). The marker is cleared.
        """
        self._remove_curve()

        xs = [s.distance for s in samples]
        ys = [s.height for s in samples]
        self.curve, = self.ax.plot(xs, ys, color=self.line_color, lw=3)
        self.fill = self.ax.fill_between(xs, ys, 0, color=self.line_color, alpha=0.1)

        self.ax.set_xlim(0, axis_bound(result.max_range))
        self.ax.set_ylim(0, axis_bound(result.max_height))

        self.marker.set_data([], [])
        self._redraw()

    def draw_position(self, point: TrajectorySample) -> None:
        """Move the marker to ``point``."""
        self.marker.set_data([point.distance], [point.height])
        self._redraw()

    def clear_position(self) -> None:
        self.marker.set_data([], [])
        self._redraw()

    @property
    def position(self) -> TrajectorySample | None:
        xs, ys = self.marker.get_data()
        if len(xs) == 0:
            return None
        return TrajectorySample(float(xs[0]), float(ys[0]))

    def _remove_curve(self) -> None:
        if self.curve is not None:
            self.curve.remove()
            self.curve = None
        if self.fill is not None:
            self.fill.remove()
            self.fill = None

    def _redraw(self) -> None:
        self.ax.figure.canvas.draw_idle()
