# core/interval.py
import math


class Interval:
    """
    A closed range [min, max] of real numbers.

    An interval with min > max is empty; EMPTY and UNIVERSE are provided as
    class attributes.
    """
    __slots__ = ('min', 'max')

    def __init__(self, min: float = math.inf, max: float = -math.inf):
        self.min = min
        self.max = max

    @staticmethod
    def enclosing(a: "Interval", b: "Interval") -> "Interval":
        """
        The tightest interval containing both a and b.
        """
        return Interval(a.min if a.min <= b.min else b.min,
                        a.max if a.max >= b.max else b.max)

    def size(self) -> float:
        return self.max - self.min

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
        """
        Pads the interval by delta in total, split equally on both sides.
        """
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __add__(self, displacement: float) -> "Interval":
        return Interval(self.min + displacement, self.max + displacement)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
