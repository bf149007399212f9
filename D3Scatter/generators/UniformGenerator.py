# generators/UniformGenerator.py

from D3Scatter.BaseGenerator import GeneratorBase, round_half_up
from D3Scatter.Domain import ChartDomain


class UniformGenerator(GeneratorBase):
    """Independent uniform x and y, both inside the chart domain."""

    name = "uniform"

    def _make_point(self, domain: ChartDomain, index: int) -> tuple[int, int]:
        x = self._random_x(domain)
        y = round_half_up(self.rng.random() * domain.y.span + domain.y.min)
        return x, y
