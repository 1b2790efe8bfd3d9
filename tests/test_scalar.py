import math
import unittest

from math2d import InvalidArgument, utils2d


class ConstantsTests(unittest.TestCase):
    def test_angle_constants(self) -> None:
        self.assertAlmostEqual(utils2d.HALF_PI * 2, math.pi)
        self.assertAlmostEqual(utils2d.QUARTER_PI * 4, math.pi)
        self.assertEqual(utils2d.TWO_PI, utils2d.TAU)
        self.assertAlmostEqual(utils2d.DEG2RAD * utils2d.RAD2DEG, 1.0)

    def test_degree_conversion(self) -> None:
        self.assertAlmostEqual(utils2d.to_deg(math.pi), 180.0)
        self.assertAlmostEqual(utils2d.to_rad(90.0), utils2d.HALF_PI)
        self.assertAlmostEqual(utils2d.to_deg(utils2d.to_rad(37.5)), 37.5)


class ScalarUtilsTests(unittest.TestCase):
    def test_distance(self) -> None:
        self.assertEqual(utils2d.distance(0, 0, 3, 4), 5.0)
        self.assertEqual(utils2d.distance(1, 1, 1, 1), 0.0)

    def test_lerp_endpoints(self) -> None:
        self.assertEqual(utils2d.lerp(2.0, 8.0, 0.0), 2.0)
        self.assertEqual(utils2d.lerp(2.0, 8.0, 1.0), 8.0)
        self.assertEqual(utils2d.lerp(2.0, 8.0, 0.5), 5.0)

    def test_lerp_is_smoothstep_not_linear(self) -> None:
        self.assertEqual(utils2d.lerp(0.0, 10.0, 0.25), 1.5625)
        self.assertEqual(utils2d.lerp(0.0, 10.0, 0.75), 8.4375)

    def test_inverse_lerp(self) -> None:
        self.assertEqual(utils2d.inverse_lerp(0.0, 10.0, 2.5), 0.25)
        self.assertEqual(utils2d.inverse_lerp(10.0, 20.0, 5.0), -0.5)

    def test_inverse_lerp_empty_range_is_not_trapped(self) -> None:
        self.assertEqual(utils2d.inverse_lerp(1.0, 1.0, 2.0), math.inf)
        self.assertEqual(utils2d.inverse_lerp(1.0, 1.0, 0.0), -math.inf)
        self.assertTrue(math.isnan(utils2d.inverse_lerp(1.0, 1.0, 1.0)))

    def test_map(self) -> None:
        self.assertEqual(utils2d.map(5, 0, 10, 0, 100), 50.0)
        self.assertEqual(utils2d.remap(0, -1, 1, 10, 20), 15.0)
        self.assertEqual(utils2d.map(15, 0, 10, 0, 100), 150.0)

    def test_map_rejects_empty_source_range(self) -> None:
        with self.assertRaises(InvalidArgument):
            utils2d.map(5, 2, 2, 0, 10)
        with self.assertRaises(ValueError):
            utils2d.normalize(1.0, 3.0, 3.0)

    def test_normalize(self) -> None:
        self.assertEqual(utils2d.normalize(127.5, 0, 255), 0.5)
        self.assertEqual(utils2d.normalize(0, 0, 255), 0.0)

    def test_constrain(self) -> None:
        self.assertEqual(utils2d.constrain(5, 0, 10), 5)
        self.assertEqual(utils2d.constrain(-5, 0, 10), 0)
        self.assertEqual(utils2d.constrain(50, 0, 10), 10)
        self.assertEqual(utils2d.clamp(50, 10, 0), 10)
        self.assertEqual(utils2d.clamp(-3, 10, 0), 0)

    def test_constrain_is_idempotent_and_bounded(self) -> None:
        for x in (-100.0, -0.5, 0.0, 3.3, 7.0, 1e9):
            for a, b in ((0.0, 5.0), (5.0, 0.0), (-2.0, -1.0)):
                once = utils2d.constrain(x, a, b)
                self.assertGreaterEqual(once, min(a, b))
                self.assertLessEqual(once, max(a, b))
                self.assertEqual(utils2d.constrain(once, a, b), once)

    def test_ieee_div(self) -> None:
        self.assertEqual(utils2d.ieee_div(6, 3), 2.0)
        self.assertEqual(utils2d.ieee_div(-1.0, 0.0), -math.inf)
        self.assertEqual(utils2d.ieee_div(1.0, -0.0), -math.inf)
        self.assertTrue(math.isnan(utils2d.ieee_div(0.0, 0.0)))


if __name__ == "__main__":
    unittest.main()
