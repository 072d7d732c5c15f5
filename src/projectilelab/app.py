"""
Interactive projectile launcher.

A matplotlib window with launch speed and angle sliders, a gravity text box,
a results panel and a LAUNCH button that animates the projectile along the
computed trajectory.

Usage:
    projectilelab                         # interactive window
    projectilelab --angle 60 --gravity moon
    projectilelab --save launch.gif --no-show
"""
from __future__ import annotations

import argparse
import math

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, Slider, TextBox

from projectilelab.core.animator import LaunchAnimator
from projectilelab.core.kinematics import (
    DEFAULT_GRAVITY,
    KinematicsResult,
    LaunchParameters,
    format_results,
)
from projectilelab.core.sampler import DEFAULT_STEP_COUNT, TrajectorySample, sample
from projectilelab.core.scheduler import FrameScheduler
from projectilelab.visualization.export import export_animation
from projectilelab.visualization.renderer import TimerScheduler, TrajectoryRenderer

RESULT_LABELS = {
    "range": "Max range",
    "height": "Max height",
    "time": "Time of flight",
    "vx": "Horizontal velocity",
    "vy": "Vertical velocity",
}


class ProjectileApp:
    """
    Wires the controls, the renderer and the launch animator together.

    Parameters
    ----------
    initial_speed : float
        Initial slider value [m/s]
    launch_angle_deg : float
        Initial slider value [deg]
    gravity : str
        Initial gravity text (number or preset name)
    speed_range : tuple[float, float]
        Speed slider limits [m/s]
    angle_range : tuple[float, float]
        Angle slider limits [deg]
    scheduler : FrameScheduler | None
        Frame source for the animation. Defaults to canvas timers.
    step_count : int
        Sampling intervals of the trajectory

    Attributes
    ----------
    result : KinematicsResult
        Kinematics of the current inputs
    samples : tuple[TrajectorySample, ...]
        Displayed trajectory
    """

    def __init__(
        self,
        initial_speed: float = 20.0,
        launch_angle_deg: float = 45.0,
        gravity: str = str(DEFAULT_GRAVITY),
        speed_range: tuple[float, float] = (0.0, 100.0),
        angle_range: tuple[float, float] = (0.0, 90.0),
        scheduler: FrameScheduler | None = None,
        step_count: int = DEFAULT_STEP_COUNT,
    ) -> None:
        self.step_count = step_count

        # 1. Figure and renderer
        self.fig = plt.figure(figsize=(11, 7))
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("Projectile Motion Simulator")
        self.ax = self.fig.add_axes([0.08, 0.35, 0.60, 0.58])
        self.renderer = TrajectoryRenderer(self.ax)

        # 2. Animation
        self.scheduler = scheduler if scheduler is not None else TimerScheduler(self.fig.canvas)
        self.animator = LaunchAnimator(
            self.scheduler,
            on_position=self.renderer.draw_position,
            on_rest=self.renderer.draw_position,
            on_control=self._set_launch_enabled,
        )

        # 3. Controls and results
        self._init_widgets(initial_speed, launch_angle_deg, gravity, speed_range, angle_range)
        self._init_results_panel()

        self.result: KinematicsResult
        self.samples: tuple[TrajectorySample, ...] = ()
        self.update_ui()

    def _init_widgets(
        self,
        initial_speed: float,
        launch_angle_deg: float,
        gravity: str,
        speed_range: tuple[float, float],
        angle_range: tuple[float, float],
    ) -> None:
        """Setup sliders, gravity box and launch button."""
        # [left, bottom, width, height]
        self.ax_speed = self.fig.add_axes([0.2, 0.22, 0.48, 0.03])
        self.ax_angle = self.fig.add_axes([0.2, 0.17, 0.48, 0.03])
        self.ax_gravity = self.fig.add_axes([0.2, 0.10, 0.15, 0.05])
        self.ax_launch = self.fig.add_axes([0.53, 0.10, 0.15, 0.05])

        self.s_speed = Slider(
            self.ax_speed, "Initial velocity", *speed_range,
            valinit=initial_speed, valstep=1, valfmt="%g m/s",
        )
        self.s_angle = Slider(
            self.ax_angle, "Launch angle", *angle_range,
            valinit=launch_angle_deg, valstep=1, valfmt="%g°",
        )
        self.tb_gravity = TextBox(self.ax_gravity, "Gravity (m/s²) ", initial=gravity)
        self.btn_launch = Button(self.ax_launch, "LAUNCH")

        self.s_speed.on_changed(self._on_input_change)
        self.s_angle.on_changed(self._on_input_change)
        self.tb_gravity.on_submit(self._on_input_change)
        self.btn_launch.on_clicked(self._on_launch)

    def _init_results_panel(self) -> None:
        self.ax_results = self.fig.add_axes([0.72, 0.35, 0.26, 0.58])
        self.ax_results.set_axis_off()
        self.ax_results.set_title("Results", loc="left")
        self.result_texts = {}
        for row, (key, label) in enumerate(RESULT_LABELS.items()):
            y = 0.9 - row * 0.18
            self.ax_results.text(0.0, y, label, fontsize=10, color="#555555")
            self.result_texts[key] = self.ax_results.text(
                0.0, y - 0.07, "", fontsize=14, fontweight="bold"
            )

    # --- Logic & Updates ---

    def read_parameters(self) -> LaunchParameters:
        """Snapshot the current control values."""
        return LaunchParameters(
            initial_speed=float(self.s_speed.val),
            launch_angle_deg=float(self.s_angle.val),
            gravity=self.tb_gravity.text,
        )

    def update_ui(self) -> None:
        """
        Re-evaluate the inputs, redraw the trajectory and refresh the results.

        A launch in progress is cancelled since its path no longer matches
        the displayed curve.
        """
        self.animator.cancel()
        self.result = self.read_parameters().evaluate()
        self.samples = sample(self.result, step_count=self.step_count)
        self.renderer.draw_curve(self.samples, self.result)
        for key, text in format_results(self.result).items():
            self.result_texts[key].set_text(text)

    def launch(self) -> None:
        """Recompute the trajectory and animate the projectile along it."""
        self.result = self.read_parameters().evaluate()
        self.samples = sample(self.result, step_count=self.step_count)
        self.animator.start(self.samples)

    @property
    def launch_enabled(self) -> bool:
        """False while a launch is animating."""
        return self.btn_launch.get_active()

    def _set_launch_enabled(self, enabled: bool) -> None:
        self.btn_launch.set_active(enabled)
        self.btn_launch.label.set_text("LAUNCH" if enabled else "IN FLIGHT...")
        self.btn_launch.label.set_alpha(1.0 if enabled else 0.5)
        self.fig.canvas.draw_idle()

    # --- Event Callbacks ---

    def _on_input_change(self, val) -> None:
        self.update_ui()

    def _on_launch(self, event) -> None:
        self.launch()

    def show(self) -> None:
        plt.show()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Compute and animate 2D projectile motion"
    )
    parser.add_argument(
        "--speed", type=float, default=20.0,
        help="Initial velocity [m/s] (default: 20)",
    )
    parser.add_argument(
        "--angle", type=float, default=45.0,
        help="Launch angle [deg] (default: 45)",
    )
    parser.add_argument(
        "--gravity", type=str, default=str(DEFAULT_GRAVITY),
        help="Gravity [m/s²] or preset name: earth, moon, mars, jupiter",
    )
    parser.add_argument(
        "--save", type=str, default=None,
        help="Render the launch animation to this GIF file",
    )
    parser.add_argument(
        "--fps", type=int, default=30,
        help="Frame rate of the saved animation (default: 30)",
    )
    parser.add_argument(
        "--no-show", action="store_true",
        help="Do not open the interactive window",
    )
    args = parser.parse_args(argv)

    if not math.isfinite(args.speed) or args.speed < 0:
        parser.error("--speed must be a finite, non-negative number")
    if not math.isfinite(args.angle):
        parser.error("--angle must be a finite number")
    if args.fps < 1:
        parser.error("--fps must be at least 1")

    params = LaunchParameters(args.speed, args.angle, args.gravity)
    result = params.evaluate()

    print(f"[ProjectileLab] v0 = {result.initial_speed:g} m/s, "
          f"θ = {result.angle_deg:g}°, g = {result.gravity:g} m/s²")
    for key, text in format_results(result).items():
        print(f"  {RESULT_LABELS[key]:<20} {text}")

    if args.save:
        frames = export_animation(params, args.save, fps=args.fps)
        print(f"[ProjectileLab] Saved {frames} frames to {args.save}")

    if not args.no_show:
        app = ProjectileApp(
            initial_speed=args.speed,
            launch_angle_deg=args.angle,
            gravity=args.gravity,
        )
        app.show()

    return 0
