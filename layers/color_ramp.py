"""
Purpose: Map a scalar (visit count) and its maximum to an RGBA fill color.
Three linear segments over ratio = value / max_value:
- ratio < 0.33         blue -> cyan      [0, g up, 255]
- 0.33 <= ratio < 0.66 cyan -> yellow    [255, g down from 255, 0]
- ratio >= 0.66        orange -> red     [255, g down from 128, 0]
Alpha is always 200.

The ratio is not clamped: values outside [0, max_value] extrapolate the
outer segments instead of saturating.
"""

import math
from typing import Tuple

RGBA = Tuple[int, int, int, int]

ALPHA = 200
LOW_BREAK = 0.33
HIGH_BREAK = 0.66


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def color_for(value: float, max_value: float) -> RGBA:
    ratio = value / max_value if max_value > 0 else 0.0

    if ratio < LOW_BREAK:
        g = _round_half_up(255 * (ratio / LOW_BREAK))
        return (0, g, 255, ALPHA)
    elif ratio < HIGH_BREAK:
        g = _round_half_up(255 - (255 * (ratio - LOW_BREAK)) / LOW_BREAK)
        return (255, g, 0, ALPHA)
    else:
        g = _round_half_up(128 - (128 * (ratio - HIGH_BREAK)) / (1 - HIGH_BREAK))
        return (255, g, 0, ALPHA)
