from PyQt5 import QtWidgets

from .Domain import AxisDomain, ChartDomain, DataPoint
from .BaseGenerator import GeneratorBase
from .generators import get_generator, UniformGenerator, LinearTrendGenerator
from .ChartBridge import ChartBridge
from .DataPointSubmitter import DataPointSubmitter
from .config import ChartConfig
from .logging_config import setup_logging
from .widgets.ChartScreen import ChartScreen, ScreenState

__all__ = [
    "QtWidgets",
    "AxisDomain",
    "ChartDomain",
    "DataPoint",
    "GeneratorBase",
    "get_generator",
    "UniformGenerator",
    "LinearTrendGenerator",
    "ChartBridge",
    "DataPointSubmitter",
    "ChartConfig",
    "setup_logging",
    "ChartScreen",
    "ScreenState",
]
