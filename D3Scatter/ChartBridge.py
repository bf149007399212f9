# ChartBridge.py

import logging
import re
from typing import Callable

from D3Scatter.Domain import ChartDomain

logger = logging.getLogger(__name__)

INIT_CHART_FUNCTION = "initChart"
ADD_POINT_FUNCTION = "addDataPoint"

_CHART_ID_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def validate_chart_id(chart_id: str) -> str:
    if not isinstance(chart_id, str) or not _CHART_ID_RE.match(chart_id):
        raise ValueError(f"Invalid chart id: {chart_id!r}")
    return chart_id


def init_chart_script(chart_id: str, domain: ChartDomain) -> str:
    validate_chart_id(chart_id)
    return (
        f"{INIT_CHART_FUNCTION}('{chart_id}', "
        + domain.x.to_js() + "," + domain.y.to_js() + ")"
    )


def add_point_script(chart_id: str, x: int, y: int) -> str:
    validate_chart_id(chart_id)
    return f"{ADD_POINT_FUNCTION}('{chart_id}',{int(x)},{int(y)})"


class ChartBridge:
    """
    Issues the page-side calls for one chart.
    `run_script` executes script text on the rendering surface, typically
    QWebEnginePage.runJavaScript. It must only be called from the thread
    owning that surface.
    """

    def __init__(self, run_script: Callable[[str], None], chart_id: str = "scatterplot") -> None:
        self._run_script = run_script
        self.chart_id: str = validate_chart_id(chart_id)
        self._initialized: bool = False
        self.points_added: int = 0

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init_chart(self, domain: ChartDomain) -> None:
        if self._initialized:
            raise RuntimeError(f"Chart '{self.chart_id}' is already initialized")
        script = init_chart_script(self.chart_id, domain)
        logger.info("Initializing chart: %s", script)
        self._run_script(script)
        self._initialized = True

    def add_point(self, x: int, y: int) -> None:
        if not self._initialized:
            raise RuntimeError(f"Chart '{self.chart_id}' received a point before initialization")
        self._run_script(add_point_script(self.chart_id, x, y))
        self.points_added += 1
