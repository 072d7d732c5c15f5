from __future__ import annotations

import os
from collections.abc import Sequence

import matplotlib.pyplot as plt
import plotly.graph_objects as go
from matplotlib.figure import Figure

from projectilelab.core.kinematics import KinematicsResult
from projectilelab.core.sampler import TrajectorySample, axis_bound
from projectilelab.visualization.renderer import LINE_COLOR, MARKER_COLOR

ENGINES = ("matplotlib", "plotly")


def _extents(
    samples: Sequence[TrajectorySample],
    result: KinematicsResult | None,
) -> tuple[float, float]:
    """Axis upper limits (distance, height) for a trajectory."""
    if result is not None:
        return axis_bound(result.max_range), axis_bound(result.max_height)
    return (
        axis_bound(max(s.distance for s in samples)),
        axis_bound(max(s.height for s in samples)),
    )


def _default_title(result: KinematicsResult | None) -> str:
    if result is None:
        return "Projectile trajectory"
    return (
        f"Projectile trajectory (v0 = {result.initial_speed:g} m/s, "
        f"θ = {result.angle_deg:g}°, g = {result.gravity:g} m/s²)"
    )


def plot_trajectory(
    samples: Sequence[TrajectorySample],
    result: KinematicsResult | None = None,
    engine: str = "matplotlib",
    title: str | None = None,
    save_path: str | None = None,
    show: bool = True,
    figsize: tuple[float, float] = (10, 6),
    line_color: str = LINE_COLOR,
) -> Figure | go.Figure:
    """
    Plot a sampled trajectory as a static figure, with launch and landing
    points marked.

    Parameters
    ----------
    samples : Sequence[TrajectorySample]
        Sampled path, at least one point
    result : KinematicsResult | None
        Launch the samples came from. Used for axis limits and the default
        title; limits fall back to the sample extents.
    engine : str
        "matplotlib" or "plotly"
    title : str | None
        Figure title
    save_path : str | None
        If given, save the figure there. Matplotlib accepts any image format
        it supports; plotly writes standalone HTML and requires ".html".
    show : bool
        Whether to display the figure.
    figsize : tuple[float, float]
        Size in inches (plotly: ×100 px)
    line_color : str

    Returns
    -------
    fig : Figure | go.Figure

    Raises
    ------
    ValueError
        On an unknown engine, empty samples or a non-HTML plotly save path
    """
    if engine not in ENGINES:
        raise ValueError(f"Unknown engine '{engine}'. Options: {ENGINES}")
    if not samples:
        raise ValueError("Cannot plot an empty trajectory.")

    title = title or _default_title(result)
    x_max, y_max = _extents(samples, result)
    xs = [s.distance for s in samples]
    ys = [s.height for s in samples]

    if engine == "plotly":
        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", name="trajectory",
            line=dict(color=line_color, width=3), fill="tozeroy",
        ))
        fig.add_trace(go.Scatter(
            x=[xs[0]], y=[ys[0]], mode="markers", name="launch",
            marker=dict(color="#34a853", size=10),
        ))
        fig.add_trace(go.Scatter(
            x=[xs[-1]], y=[ys[-1]], mode="markers", name="landing",
            marker=dict(color=MARKER_COLOR, size=10),
        ))
        fig.update_layout(
            title=title,
            xaxis=dict(title="Distance (m)", range=[0, x_max]),
            yaxis=dict(title="Height (m)", range=[0, y_max]),
            width=int(figsize[0] * 100),
            height=int(figsize[1] * 100),
        )
        if save_path:
            if not save_path.endswith(".html"):
                raise ValueError("Plotly figures are saved as HTML, use a '.html' path.")
            os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
            fig.write_html(save_path)
        if show:
            fig.show()
        return fig

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.plot(xs, ys, color=line_color, lw=3, label="trajectory")
    ax.fill_between(xs, ys, 0, color=line_color, alpha=0.1)
    ax.scatter(xs[0], ys[0], color="#34a853", s=40, zorder=3, label="launch")
    ax.scatter(xs[-1], ys[-1], color=MARKER_COLOR, s=40, zorder=3, label="landing")
    ax.set_xlim(0, x_max)
    ax.set_ylim(0, y_max)
    ax.set_xlabel("Distance (m)"); ax.set_ylabel("Height (m)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    ax.set_title(title)

    fig.tight_layout()
    if save_path:
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        fig.savefig(save_path, dpi=180, bbox_inches="tight")
    if show:
        plt.show()
    return fig
