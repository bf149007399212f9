import io
import logging
import os
import unittest
from contextlib import redirect_stderr

from D3Scatter.config import ChartConfig, PAGE_PATH, ASSETS_PATH, BUNDLED_D3_SRC, D3_PATH, get_resource_path
from D3Scatter.Domain import ChartDomain


class TestPaths(unittest.TestCase):
    def test_page_is_bundled(self):
        self.assertTrue(os.path.isfile(PAGE_PATH))
        self.assertTrue(os.path.isfile(os.path.join(ASSETS_PATH, "js", "my_scatter_plot.js")))
        self.assertTrue(os.path.isfile(os.path.join(ASSETS_PATH, "js", "any_scatter_plot.js")))
        self.assertTrue(os.path.isfile(D3_PATH))

    def test_bundled_d3_is_version_three(self):
        with open(D3_PATH, "r", encoding="utf-8") as fh:
            self.assertIn('version:"3.', fh.read())

    def test_bundled_d3_src_resolves_from_page(self):
        resolved = os.path.normpath(os.path.join(os.path.dirname(PAGE_PATH), BUNDLED_D3_SRC))
        self.assertEqual(resolved, os.path.normpath(D3_PATH))

    def test_zero_width_domain_guard_in_page_helpers(self):
        with open(os.path.join(ASSETS_PATH, "js", "any_scatter_plot.js"), "r", encoding="utf-8") as fh:
            source = fh.read()
        self.assertIn("span === 0 ? 0.5", source)
        self.assertIn("isFinite(pixel.x)", source)

    def test_resource_path_is_absolute(self):
        self.assertTrue(os.path.isabs(get_resource_path("assets")))


class TestChartConfig(unittest.TestCase):
    def test_defaults(self):
        config = ChartConfig()
        self.assertEqual(config.chart_id, "scatterplot")
        self.assertEqual(config.domain, ChartDomain())
        self.assertEqual(config.variant, "uniform")
        self.assertEqual(config.point_count, 20)
        self.assertIsNone(config.seed)

    def test_unknown_variant(self):
        with self.assertRaises(ValueError):
            ChartConfig(variant="cubic")

    def test_point_count_lower_bound_matches_cli(self):
        for count in (0, -3):
            with self.assertRaises(ValueError):
                ChartConfig(point_count=count)
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                ChartConfig.from_args(["--count", str(count)])
        self.assertEqual(ChartConfig(point_count=1).point_count, 1)

    def test_d3_source_defaults_to_bundled_copy(self):
        config = ChartConfig()
        self.assertIsNone(config.d3_url)
        self.assertEqual(config.d3_src, BUNDLED_D3_SRC)
        self.assertFalse(config.uses_remote_d3)

    def test_d3_override(self):
        config = ChartConfig.from_args(["--d3-url", "https://example.org/d3.js"])
        self.assertEqual(config.d3_src, "https://example.org/d3.js")
        self.assertTrue(config.uses_remote_d3)
        self.assertFalse(ChartConfig(d3_url="../js/d3.local.js").uses_remote_d3)

    def test_from_args(self):
        config = ChartConfig.from_args([
            "--variant", "linear", "--x-min", "10", "--x-max", "20",
            "--y-min", "1", "--y-max", "2", "--count", "5", "--seed", "3",
            "--log-level", "DEBUG",
        ])
        self.assertEqual(config.variant, "linear")
        self.assertEqual(config.domain, ChartDomain.from_bounds(10, 20, 1, 2))
        self.assertEqual(config.point_count, 5)
        self.assertEqual(config.seed, 3)
        self.assertEqual(config.log_level, logging.DEBUG)

    def test_from_args_defaults(self):
        config = ChartConfig.from_args([])
        self.assertEqual(config.domain, ChartDomain())
        self.assertEqual(config.point_count, 20)

    def test_invalid_args_exit(self):
        for argv in (["--x-min", "5", "--x-max", "1"], ["--count", "0"], ["--variant", "cubic"]):
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                ChartConfig.from_args(argv)


if __name__ == "__main__":
    unittest.main(verbosity=2)
