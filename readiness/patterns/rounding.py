"""
Rounding shared by the scoring core and the analytical patterns.
"""

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like the report front end."""
    return int(math.floor(value + 0.5))
