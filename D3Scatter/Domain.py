# Domain.py

from typing import Optional

SAFE = "dataPointSafe"
WARNING = "dataPointWarning"
DANGER = "dataPointDanger"


class AxisDomain:
    def __init__(self, min: int, max: int) -> None:
        if min > max:
            raise ValueError(f"Axis minimum {min} is greater than maximum {max}")
        self._min: int = int(min)
        self._max: int = int(max)

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def span(self) -> int:
        return self._max - self._min

    @property
    def mid(self) -> float:
        return self.span / 2 + self._min

    def contains(self, value: float) -> bool:
        return self._min <= value <= self._max

    def to_js(self) -> str:
        return "{ min : " + str(self._min) + ", max : " + str(self._max) + " }"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AxisDomain):
            return NotImplemented
        return (self._min, self._max) == (other._min, other._max)

    def __hash__(self) -> int:
        return hash((self._min, self._max))

    def __repr__(self) -> str:
        return f"AxisDomain(min={self._min}, max={self._max})"


class ChartDomain:
    """
    Visible plotting range of the chart, one AxisDomain per axis.
    Fixed once constructed; the page receives it exactly once at init.
    """

    def __init__(self, x: Optional[AxisDomain] = None, y: Optional[AxisDomain] = None) -> None:
        self._x: AxisDomain = x if x is not None else AxisDomain(0, 10000)
        self._y: AxisDomain = y if y is not None else AxisDomain(100, 200)

    @classmethod
    def from_bounds(cls, x_min: int, x_max: int, y_min: int, y_max: int) -> "ChartDomain":
        return cls(AxisDomain(x_min, x_max), AxisDomain(y_min, y_max))

    @property
    def x(self) -> AxisDomain:
        return self._x

    @property
    def y(self) -> AxisDomain:
        return self._y

    def contains(self, x: float, y: float) -> bool:
        return self._x.contains(x) and self._y.contains(y)

    def classify(self, x: float, y: float) -> str:
        """
        Return the CSS class the page draws a point with.
        Upper right quadrant is safe, upper left and lower right are
        warnings, lower left is danger. Mid-lines belong to the upper/right side.
        """
        right = x >= self._x.mid
        upper = y >= self._y.mid
        if right and upper:
            return SAFE
        if upper or right:
            return WARNING
        return DANGER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChartDomain):
            return NotImplemented
        return (self._x, self._y) == (other._x, other._y)

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"ChartDomain(x={self._x!r}, y={self._y!r})"


class DataPoint:
    __slots__ = ("index", "x", "y")

    def __init__(self, index: int, x: int, y: int) -> None:
        self.index: int = index
        self.x: int = x
        self.y: int = y

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"DataPoint(index={self.index}, x={self.x}, y={self.y})"
