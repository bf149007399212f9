"""
Configuration & Path Management
===============================
Central registry for bundled asset paths and the chart settings a screen is
built from.

Exports:
    ASSETS_PATH (str): Absolute path to the bundled assets directory.
    PAGE_PATH (str): Absolute path to the scatterplot page template.
    ChartConfig: Settings for one chart screen, optionally parsed from argv.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from D3Scatter.Domain import ChartDomain
from D3Scatter.DataPointSubmitter import DEFAULT_POINT_COUNT
from D3Scatter.generators import GENERATORS


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a bundled resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, "D3Scatter", relative_path)

    # config.py sits next to the assets directory
    package_dir: Path = Path(__file__).resolve().parent
    return os.path.join(str(package_dir), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
PAGE_PATH: str = os.path.join(ASSETS_PATH, "html", "scatterplot.html")

DEFAULT_CHART_ID = "scatterplot"
D3_PATH: str = os.path.join(ASSETS_PATH, "js", "d3.v3.min.js")

# relative to the page, resolved against its file URL
BUNDLED_D3_SRC = "../js/d3.v3.min.js"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class ChartConfig:
    def __init__(
        self,
        *,
        chart_id: str = DEFAULT_CHART_ID,
        domain: Optional[ChartDomain] = None,
        variant: str = "uniform",
        point_count: int = DEFAULT_POINT_COUNT,
        seed: Optional[int] = None,
        page_path: str = PAGE_PATH,
        d3_url: Optional[str] = None,
        log_level: int = logging.INFO,
        log_file: Optional[str] = None,
    ) -> None:
        if variant not in GENERATORS:
            raise ValueError(f"Unknown variant '{variant}' (available: {', '.join(sorted(GENERATORS))})")
        if point_count < 1:
            raise ValueError(f"Point count must be at least 1, got {point_count}")
        self.chart_id = chart_id
        self.domain = domain if domain is not None else ChartDomain()
        self.variant = variant
        self.point_count = point_count
        self.seed = seed
        self.page_path = page_path
        self.d3_url = d3_url
        self.log_level = log_level
        self.log_file = log_file

    @property
    def d3_src(self) -> str:
        return self.d3_url if self.d3_url else BUNDLED_D3_SRC

    @property
    def uses_remote_d3(self) -> bool:
        return self.d3_src.startswith(("http://", "https://"))

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> "ChartConfig":
        args = parse_args(argv)
        return cls(
            domain=ChartDomain.from_bounds(args.x_min, args.x_max, args.y_min, args.y_max),
            variant=args.variant,
            point_count=args.count,
            seed=args.seed,
            d3_url=args.d3_url,
            log_level=getattr(logging, args.log_level),
            log_file=args.log_file,
        )

    def __repr__(self) -> str:
        return (
            f"ChartConfig(chart_id={self.chart_id!r}, domain={self.domain!r}, "
            f"variant={self.variant!r}, point_count={self.point_count}, seed={self.seed})"
        )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = ChartDomain()
    p = argparse.ArgumentParser(description="D3.js scatterplot fed with random points")
    p.add_argument("--variant", type=str, choices=sorted(GENERATORS), default="uniform",
                   help="Point generation policy.")
    p.add_argument("--x-min", type=int, default=defaults.x.min)
    p.add_argument("--x-max", type=int, default=defaults.x.max)
    p.add_argument("--y-min", type=int, default=defaults.y.min)
    p.add_argument("--y-max", type=int, default=defaults.y.max)
    p.add_argument("--count", type=int, default=DEFAULT_POINT_COUNT,
                   help="Points submitted after the page loads.")
    p.add_argument("--seed", type=int, default=None,
                   help="RNG seed.")
    p.add_argument("--d3-url", type=str, default=None,
                   help="Load D3 v3 from this URL instead of the bundled copy.")
    p.add_argument("--log-level", type=str, choices=LOG_LEVELS, default="INFO")
    p.add_argument("--log-file", type=str, default=None)

    args = p.parse_args(argv)
    if args.x_min > args.x_max:
        p.error("--x-min must not be greater than --x-max")
    if args.y_min > args.y_max:
        p.error("--y-min must not be greater than --y-max")
    if args.count < 1:
        p.error("--count must be at least 1")
    return args
