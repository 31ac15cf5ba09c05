import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from amaryllis_renderer.errors import InvalidColorError, InvalidDimensionsError
from amaryllis_renderer.models import Avatar, TextLabel, parse_rgba


class AvatarTests(unittest.TestCase):
    def test_name_and_color_give_label(self):
        avatar = Avatar.create(200, 200, "John Middlename Doe", (0, 0, 0, 255))
        self.assertEqual(avatar.initials, "JD")
        self.assertEqual(avatar.text_color, (0, 0, 0, 255))
        self.assertEqual(avatar.label, TextLabel(text="JD", color=(0, 0, 0, 255)))

    def test_single_word_name(self):
        avatar = Avatar.create(64, 64, "Cher", (10, 20, 30, 255))
        self.assertEqual(len(avatar.initials), 1)

    def test_name_without_color_has_no_initials(self):
        avatar = Avatar.create(200, 200, "John Doe")
        self.assertIsNone(avatar.initials)
        self.assertIsNone(avatar.text_color)
        self.assertIsNone(avatar.label)

    def test_no_name(self):
        avatar = Avatar.create(200, 200, None, (0, 0, 0, 255))
        self.assertIsNone(avatar.initials)
        self.assertIsNone(avatar.label)

    def test_blank_name_has_no_label(self):
        self.assertIsNone(Avatar.create(20, 20, "   ", (0, 0, 0, 255)).label)

    def test_size(self):
        self.assertEqual(Avatar.create(3, 7).size, (3, 7))

    def test_invalid_dimensions(self):
        for width, height in [(0, 10), (10, 0), (-1, 5), (5, -3), (1.5, 2), (True, 4)]:
            with self.assertRaises(InvalidDimensionsError):
                Avatar.create(width, height)

    def test_descriptor_is_immutable(self):
        avatar = Avatar.create(10, 10, "A B", (0, 0, 0, 255))
        with self.assertRaises(AttributeError):
            avatar.label = None  # type: ignore[misc]


class ColorTests(unittest.TestCase):
    def test_rgba_tuple(self):
        self.assertEqual(parse_rgba([1, 2, 3, 4]), (1, 2, 3, 4))

    def test_rgb_defaults_opaque(self):
        self.assertEqual(parse_rgba((9, 8, 7)), (9, 8, 7, 255))

    def test_html_names(self):
        self.assertEqual(parse_rgba("white"), (255, 255, 255, 255))
        self.assertEqual(parse_rgba("#ff000080"), (255, 0, 0, 128))

    def test_invalid_colors(self):
        for bad in [(0, 0), (0, 0, 0, 0, 0), (256, 0, 0, 0), (-1, 0, 0, 0), (0.5, 0, 0, 0), "notacolor"]:
            with self.assertRaises(InvalidColorError):
                parse_rgba(bad)

    def test_invalid_text_color_fails_construction(self):
        with self.assertRaises(InvalidColorError):
            Avatar.create(10, 10, "A B", (300, 0, 0, 255))


if __name__ == "__main__":
    unittest.main()
