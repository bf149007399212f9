from typing import Dict, Optional, Type

from D3Scatter.BaseGenerator import GeneratorBase
from .UniformGenerator import UniformGenerator
from .LinearTrendGenerator import LinearTrendGenerator

GENERATORS: Dict[str, Type[GeneratorBase]] = {
    UniformGenerator.name: UniformGenerator,
    LinearTrendGenerator.name: LinearTrendGenerator,
}


def get_generator(name: str, seed: Optional[int] = None) -> GeneratorBase:
    try:
        cls = GENERATORS[name]
    except KeyError:
        available = ", ".join(sorted(GENERATORS))
        raise ValueError(f"Unknown generator '{name}' (available: {available})") from None
    return cls(seed=seed)


__all__ = [
    "GENERATORS",
    "get_generator",
    "UniformGenerator",
    "LinearTrendGenerator",
]
