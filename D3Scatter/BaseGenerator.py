from abc import ABC, abstractmethod
from typing import Iterator, Optional
import numpy as np
from D3Scatter.Domain import ChartDomain, DataPoint


def round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


class GeneratorBase(ABC):
    """
    Abstract base class for point generation policies.
    A generator yields points lazily so nothing is retained between deliveries.
    """

    name: str = ""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng: np.random.Generator = np.random.default_rng(seed)

    def generate(self, domain: ChartDomain, count: int) -> Iterator[DataPoint]:
        if count < 0:
            raise ValueError(f"Point count must be non-negative, got {count}")
        for index in range(count):
            x, y = self._make_point(domain, index)
            yield DataPoint(index, x, y)

    def _random_x(self, domain: ChartDomain) -> int:
        return round_half_up(self.rng.random() * domain.x.span + domain.x.min)

    @abstractmethod
    def _make_point(self, domain: ChartDomain, index: int) -> tuple[int, int]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed})"
