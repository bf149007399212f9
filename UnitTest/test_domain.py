import unittest

from D3Scatter.Domain import AxisDomain, ChartDomain, DataPoint, SAFE, WARNING, DANGER


class TestAxisDomain(unittest.TestCase):
    def test_js_literal_matches_page_format(self):
        self.assertEqual(AxisDomain(0, 10000).to_js(), "{ min : 0, max : 10000 }")
        self.assertEqual(AxisDomain(-5, 5).to_js(), "{ min : -5, max : 5 }")

    def test_mid_and_span(self):
        d = AxisDomain(100, 200)
        self.assertEqual(d.span, 100)
        self.assertEqual(d.mid, 150.0)

    def test_contains_is_inclusive(self):
        d = AxisDomain(100, 200)
        self.assertTrue(d.contains(100))
        self.assertTrue(d.contains(200))
        self.assertFalse(d.contains(99))
        self.assertFalse(d.contains(201))

    def test_degenerate_domain_allowed(self):
        d = AxisDomain(7, 7)
        self.assertEqual(d.span, 0)
        self.assertTrue(d.contains(7))

    def test_min_greater_than_max_rejected(self):
        with self.assertRaises(ValueError):
            AxisDomain(10, 1)

    def test_equality(self):
        self.assertEqual(AxisDomain(1, 2), AxisDomain(1, 2))
        self.assertNotEqual(AxisDomain(1, 2), AxisDomain(1, 3))


class TestChartDomain(unittest.TestCase):
    def test_defaults(self):
        d = ChartDomain()
        self.assertEqual((d.x.min, d.x.max), (0, 10000))
        self.assertEqual((d.y.min, d.y.max), (100, 200))

    def test_from_bounds(self):
        d = ChartDomain.from_bounds(1, 2, 3, 4)
        self.assertEqual(d, ChartDomain(AxisDomain(1, 2), AxisDomain(3, 4)))

    def test_contains(self):
        d = ChartDomain()
        self.assertTrue(d.contains(0, 100))
        self.assertTrue(d.contains(10000, 200))
        self.assertFalse(d.contains(5000, 250))

    def test_classify_quadrants(self):
        d = ChartDomain()
        self.assertEqual(d.classify(9000, 190), SAFE)
        self.assertEqual(d.classify(1000, 190), WARNING)
        self.assertEqual(d.classify(9000, 110), WARNING)
        self.assertEqual(d.classify(1000, 110), DANGER)

    def test_classify_midlines_count_as_upper_right(self):
        d = ChartDomain()
        self.assertEqual(d.classify(5000, 150), SAFE)


class TestDataPoint(unittest.TestCase):
    def test_as_tuple(self):
        p = DataPoint(3, 10, 20)
        self.assertEqual(p.index, 3)
        self.assertEqual(p.as_tuple(), (10, 20))


if __name__ == "__main__":
    unittest.main(verbosity=2)
