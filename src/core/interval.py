# core/interval.py
import math

INFINITY = math.inf

class Interval:
    """
    A closed scalar range [minimum, maximum]. The default interval is empty
    (minimum = +inf, maximum = -inf).
    """

    def __init__(self, minimum: float = INFINITY, maximum: float = -INFINITY):
        self.min = minimum
        self.max = maximum

    @staticmethod
    def union(a: "Interval", b: "Interval") -> "Interval":
        """The tightest interval enclosing both a and b."""
        return Interval(min(a.min, b.min), max(a.max, b.max))

    def size(self) -> float:
        return self.max - self.min

    def is_empty(self) -> bool:
        return self.min > self.max

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


EMPTY = Interval(INFINITY, -INFINITY)
UNIVERSE = Interval(-INFINITY, INFINITY)
