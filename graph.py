import matplotlib
matplotlib.use('Agg')  # Safe for macOS/server
import numpy as np
import matplotlib.pyplot as plt
import mpld3

from presenter import equation, fmt

PLOT_MIN_HALF_WIDTH = 5.0
PLOT_POINTS = 400


def plot_range(a, b, c, roots, min_half_width=PLOT_MIN_HALF_WIDTH):
    """x interval covering the roots, or the vertex when there are none."""
    if roots:
        centre = sum(roots) / len(roots)
        half = max(abs(r - centre) for r in roots) * 1.5
    elif a != 0:
        centre, half = -b / (2 * a), 0.0
    else:
        centre, half = 0.0, 0.0
    half = max(half, min_half_width)
    return centre - half, centre + half


def plot_html(a, b, c, result, points=PLOT_POINTS, min_half_width=PLOT_MIN_HALF_WIDTH):
    roots = list(result.roots)
    lo, hi = plot_range(a, b, c, roots, min_half_width)

    x_vals = np.linspace(lo, hi, points)
    y_vals = a * x_vals ** 2 + b * x_vals + c

    fig, ax = plt.subplots()
    try:
        ax.plot(x_vals, y_vals, label=equation(a, b, c))
        ax.axhline(0.0, color='grey', linewidth=0.5)
        for r in roots:
            ax.plot(r, 0.0, 'ro')
            ax.annotate(fmt(r), (r, 0.0))
        ax.set_title("Equation and Roots")
        ax.set_xlabel('x')
        ax.set_ylabel('f(x)')
        ax.legend()
        return mpld3.fig_to_html(fig)
    finally:
        plt.close(fig)
