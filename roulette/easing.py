"""
Easing curves for the spin animation
"""

from typing import Callable

# transform 4s cubic-bezier(0.2, 0.8, 0.3, 1)
SPIN_CURVE = (0.2, 0.8, 0.3, 1.0)


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """CSS-style timing function: maps elapsed fraction to progress fraction."""

    def _axis(t, p1, p2):
        # Bezier with P0 = 0 and P3 = 1
        return 3 * (1 - t) ** 2 * t * p1 + 3 * (1 - t) * t ** 2 * p2 + t ** 3

    def _axis_slope(t, p1, p2):
        return 3 * (1 - t) ** 2 * p1 + 6 * (1 - t) * t * (p2 - p1) + 3 * t ** 2 * (1 - p2)

    def _solve_t(x):
        t = x
        for _ in range(8):
            err = _axis(t, x1, x2) - x
            if abs(err) < 1e-7:
                return t
            slope = _axis_slope(t, x1, x2)
            if abs(slope) < 1e-6:
                break
            t -= err / slope

        # Newton stalled, fall back to bisection
        lo, hi = 0.0, 1.0
        t = x
        for _ in range(50):
            err = _axis(t, x1, x2) - x
            if abs(err) < 1e-7:
                break
            if err > 0:
                hi = t
            else:
                lo = t
            t = (lo + hi) / 2
        return t

    def ease(x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return _axis(_solve_t(x), y1, y2)

    return ease


spin_ease = cubic_bezier(*SPIN_CURVE)
