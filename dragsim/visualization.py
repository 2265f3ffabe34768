"""
Visualization Engine
====================
Plots for trajectory analysis:
  1. Trajectory (height vs horizontal distance)
  2. Shape comparison (Cd presets, same launch)
  3. Parameter sweep (range and flight time vs one input)
  4. Drag-free check against the closed-form parabola
  5. Animated trajectory (saved as GIF)
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from typing import Dict, List
import os

from .drag_model import SHAPE_NAMES
from .environment import DEFAULT_CONFIG
from .models import SimulationInput, SimulationOutput
from .studies import SweepPoint
from .validation import ballistic_reference


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
    'font_family': 'monospace',
}

SHAPE_COLORS = {
    'sphere': '#3498db',
    'cube': '#e74c3c',
}


def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    if not isinstance(axes, np.ndarray):
        axes = [axes]
    else:
        axes = axes.flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def _legend(ax, **kwargs):
    ax.legend(facecolor='#1a1a1a', edgecolor='#444',
              labelcolor=STYLE['text_color'], **kwargs)


def _save(fig, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


# ══════════════════════════════════════════════════════════════════════════
#  1. Single Trajectory Plot
# ══════════════════════════════════════════════════════════════════════════

def plot_trajectory(result: SimulationOutput, save_path: str = None,
                    title: str = None, show: bool = False) -> plt.Figure:
    """Height vs horizontal distance for a single trajectory."""
    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    ax.plot(result.x, result.y, color=STYLE['accent_colors'][0],
            linewidth=2.5, label='Trajectory')

    # Mark launch and impact
    ax.plot(0, result.y[0], 'o', color='#00e676', markersize=10,
            label='Launch', zorder=5)
    ax.plot(result.x[-1], result.y[-1], 'x', color='#ff5252',
            markersize=12, markeredgewidth=3, label='Impact', zorder=5)

    ax.set_xlabel('Horizontal distance (m)', fontsize=12)
    ax.set_ylabel('Height (m)', fontsize=12)
    ax.set_title(title or (f'Trajectory — T = {result.total_time:.2f} s, '
                           f'range = {result.max_distance:.2f} m'),
                 fontsize=13, fontweight='bold')
    _legend(ax, loc='upper right', fontsize=10)
    ax.set_ylim(bottom=0)

    plt.tight_layout()
    _save(fig, save_path)
    if show:
        plt.show()
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  2. Shape Comparison
# ══════════════════════════════════════════════════════════════════════════

def plot_shape_comparison(results: Dict[str, SimulationOutput],
                          save_path: str = None) -> plt.Figure:
    """Overlaid trajectories plus a range bar chart for each shape."""
    fig, axes = plt.subplots(1, 2, figsize=(16, 6))
    _apply_dark_style(fig, axes)

    ax = axes[0]
    for i, (key, res) in enumerate(results.items()):
        color = SHAPE_COLORS.get(key, STYLE['accent_colors'][i % 6])
        ax.plot(res.x, res.y, color=color, linewidth=2,
                label=SHAPE_NAMES.get(key, key))
    ax.set_xlabel('Horizontal distance (m)')
    ax.set_ylabel('Height (m)')
    ax.set_title('Trajectory Comparison', fontweight='bold')
    _legend(ax, fontsize=10)
    ax.set_ylim(bottom=0)

    ax = axes[1]
    names = [SHAPE_NAMES.get(k, k) for k in results]
    ranges = [res.max_distance for res in results.values()]
    colors = [SHAPE_COLORS.get(k, '#888') for k in results]
    bars = ax.barh(names, ranges, color=colors, alpha=0.85, edgecolor='#555')
    ax.set_xlabel('Range (m)')
    ax.set_title('Range Comparison', fontweight='bold')
    for bar, r in zip(bars, ranges):
        ax.text(bar.get_width(), bar.get_y() + bar.get_height()/2,
                f' {r:.1f} m', va='center', color=STYLE['text_color'], fontsize=10)

    fig.suptitle('Shape Comparison — Same Launch Conditions',
                 fontsize=15, fontweight='bold', color=STYLE['text_color'], y=1.02)
    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  3. Parameter Sweep
# ══════════════════════════════════════════════════════════════════════════

def plot_sweep(points: List[SweepPoint], field: str,
               save_path: str = None) -> plt.Figure:
    """Range and flight time as functions of one swept input."""
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    _apply_dark_style(fig, axes)

    values = [p.value for p in points]

    axes[0].plot(values, [p.max_distance for p in points], 'o-',
                 color='#00d4ff', linewidth=2, markersize=6)
    axes[0].set_xlabel(field)
    axes[0].set_ylabel('Range (m)')
    axes[0].set_title('RANGE', fontweight='bold')

    axes[1].plot(values, [p.total_time for p in points], 's-',
                 color='#ff6b35', linewidth=2, markersize=6)
    axes[1].set_xlabel(field)
    axes[1].set_ylabel('Flight time (s)')
    axes[1].set_title('FLIGHT TIME', fontweight='bold')

    fig.suptitle(f'Sensitivity to {field}', fontsize=14, fontweight='bold',
                 color=STYLE['text_color'], y=1.02)
    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  4. Drag-Free Check
# ══════════════════════════════════════════════════════════════════════════

def plot_ballistic_check(result: SimulationOutput, inputs: SimulationInput,
                         gravity: float = DEFAULT_CONFIG.gravity,
                         save_path: str = None) -> plt.Figure:
    """Engine trajectory against the closed-form parabola, with height error."""
    x_ref, y_ref = ballistic_reference(inputs, result.time, gravity)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    _apply_dark_style(fig, axes)

    ax = axes[0]
    ax.plot(x_ref, y_ref, color='#ffeb3b', linewidth=2, label='Closed form')
    ax.plot(result.x, result.y, '--', color='#00d4ff', linewidth=2,
            label='Semi-implicit Euler')
    ax.set_xlabel('Horizontal distance (m)')
    ax.set_ylabel('Height (m)')
    ax.set_title('Trajectory', fontweight='bold')
    _legend(ax, fontsize=10)
    ax.set_ylim(bottom=0)

    ax = axes[1]
    ax.plot(result.time[:-1], (result.y - y_ref)[:-1], color='#e040fb', linewidth=2)
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('y_sim − y_exact (m)')
    ax.set_title('Height Error', fontweight='bold')

    plt.tight_layout()
    _save(fig, save_path)
    return fig


# ══════════════════════════════════════════════════════════════════════════
#  5. Animated Trajectory (GIF)
# ══════════════════════════════════════════════════════════════════════════

def create_trajectory_animation(result: SimulationOutput,
                                save_path: str = 'outputs/trajectory_anim.gif',
                                frames: int = 100) -> str:
    """Create animated GIF of trajectory with trail."""
    from matplotlib.animation import FuncAnimation, PillowWriter

    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    x = result.x
    y = result.y

    x_lo, x_hi = min(0.0, x.min()), max(0.0, x.max())
    ax.set_xlim(x_lo * 1.05 - 1.0, x_hi * 1.05 + 1.0)
    ax.set_ylim(0, max(y.max(), 1.0) * 1.15)
    ax.set_xlabel('Horizontal distance (m)', fontsize=12)
    ax.set_ylabel('Height (m)', fontsize=12)
    ax.set_title('Trajectory Animation', fontsize=14, fontweight='bold')

    trail_line, = ax.plot([], [], color='#00d4ff', linewidth=1.5, alpha=0.6)
    point, = ax.plot([], [], 'o', color='#ff5252', markersize=8)
    time_text = ax.text(0.02, 0.95, '', transform=ax.transAxes,
                        color=STYLE['text_color'], fontsize=11, fontfamily='monospace')

    # Subsample for animation
    total_pts = len(x)
    step = max(1, total_pts // frames)
    indices = list(range(0, total_pts, step))
    if indices[-1] != total_pts - 1:
        indices.append(total_pts - 1)

    def animate(frame_idx):
        idx = indices[min(frame_idx, len(indices) - 1)]
        trail_line.set_data(x[:idx+1], y[:idx+1])
        point.set_data([x[idx]], [y[idx]])
        time_text.set_text(
            f't={result.time[idx]:.2f}s | x={x[idx]:.1f} m | y={y[idx]:.1f} m'
        )
        return trail_line, point, time_text

    anim = FuncAnimation(fig, animate, frames=len(indices), interval=50, blit=True)
    anim.save(save_path, writer=PillowWriter(fps=20),
              savefig_kwargs={'facecolor': STYLE['bg_color']})
    plt.close(fig)
    return save_path
