# core/interval.py
import math


class Interval:
    """
    A closed range [min, max] of ray parameters.

    The scene scan narrows the upper bound as nearer hits are found, so a
    farther intersection is rejected without a second pass.
    """
    def __init__(self, min: float = math.inf, max: float = -math.inf):
        self.min = min
        self.max = max

    def contains(self, x: float) -> bool:
        """Inclusive membership test."""
        return self.min <= x <= self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"
