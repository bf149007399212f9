# generators/LinearTrendGenerator.py

import math
from D3Scatter.BaseGenerator import GeneratorBase
from D3Scatter.Domain import ChartDomain


class LinearTrendGenerator(GeneratorBase):
    """
    y follows the line x / 15 + 150 with up to 20% jitter.
    Even indices are pushed above the line and rounded down, odd indices
    below it and rounded up, so y stays within 20% of the exact trend value.
    y is not clamped to the y domain.
    """

    name = "linear"

    SLOPE_DIVISOR = 15
    INTERCEPT = 150
    MAX_JITTER = 0.2

    def trend(self, x: int) -> float:
        return x / self.SLOPE_DIVISOR + self.INTERCEPT

    def _make_point(self, domain: ChartDomain, index: int) -> tuple[int, int]:
        x = self._random_x(domain)
        base = self.trend(x)
        jitter = self.rng.uniform(0.0, self.MAX_JITTER)

        if index % 2 == 0:
            y = math.floor(base * (1 + jitter))
        else:
            y = math.ceil(base * (1 - jitter))
        return x, y
