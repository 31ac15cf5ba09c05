import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from amaryllis_renderer.gradients import LinearGradient, custom_gradient, get_gradient, list_gradients, reds


class LinearGradientTests(unittest.TestCase):
    def test_endpoints(self):
        grad = LinearGradient([(0, 0, 0, 255), (200, 100, 50, 255)])
        self.assertEqual(grad.at(0.0), (0, 0, 0, 255))
        self.assertEqual(grad.at(1.0), (200, 100, 50, 255))

    def test_midpoint(self):
        grad = LinearGradient([(0, 0, 0, 255), (200, 100, 50, 255)])
        self.assertEqual(grad(0.5), (100, 50, 25, 255))

    def test_clamps_out_of_range(self):
        grad = LinearGradient(["black", "white"])
        self.assertEqual(grad(-3.0), (0, 0, 0, 255))
        self.assertEqual(grad(7.0), (255, 255, 255, 255))

    def test_explicit_positions(self):
        grad = LinearGradient([(0, 0, 0, 0), (100, 100, 100, 100), (200, 200, 200, 200)], positions=[0.0, 0.2, 1.0])
        self.assertEqual(grad(0.2), (100, 100, 100, 100))
        self.assertEqual(grad(0.6), (150, 150, 150, 150))

    def test_at_array_shape(self):
        grad = custom_gradient("deeppink", "cyan")
        out = grad.at_array(np.zeros((3, 5)))
        self.assertEqual(out.shape, (3, 5, 4))
        self.assertEqual(out.dtype, np.uint8)
        self.assertEqual(tuple(out[0, 0]), (255, 20, 147, 255))

    def test_validation(self):
        with self.assertRaises(ValueError):
            LinearGradient(["red"])
        with self.assertRaises(ValueError):
            LinearGradient(["red", "blue"], positions=[0.0])
        with self.assertRaises(ValueError):
            LinearGradient(["red", "blue"], positions=[0.8, 0.2])
        with self.assertRaises(ValueError):
            LinearGradient(["red", "blue"], positions=[0.0, 1.5])


class PresetTests(unittest.TestCase):
    def test_presets_listed(self):
        self.assertIn("reds", list_gradients())
        self.assertIn("blues", list_gradients())

    def test_reds_runs_light_to_dark(self):
        grad = reds()
        light, dark = grad(0.0), grad(1.0)
        self.assertGreater(sum(light[:3]), sum(dark[:3]))

    def test_lookup_is_case_insensitive(self):
        self.assertEqual(get_gradient("Greys")(0.0), (255, 255, 255, 255))

    def test_unknown_preset(self):
        with self.assertRaises(ValueError):
            get_gradient("plaid")


if __name__ == "__main__":
    unittest.main()
