import sys
import unittest
from functools import partial
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from carousel_renderer.layout import (
    MAX_TEXT_WIDTH,
    QUOTE_START_Y,
    SLIDE_SIZE,
    build_deck_layouts,
    build_layout,
)
from carousel_renderer.models import Profile
from carousel_renderer.themes import get_theme
from carousel_renderer.wrap import wrap_text

# 20 units per character: 39 characters fit in one 780-wide line.
WRAP = partial(wrap_text, measure=lambda s: len(s) * 20.0)


class LayoutTests(unittest.TestCase):
    def setUp(self):
        self.profile = Profile(display_name="Ada", handle="@ada", avatar=None)
        self.theme = get_theme("Dark Mode")

    def test_fixed_geometry(self):
        layout = build_layout("Work hard.", 0, 2, self.profile, self.theme, WRAP)
        self.assertEqual(layout.size, SLIDE_SIZE)
        self.assertEqual(MAX_TEXT_WIDTH, 780)
        self.assertEqual((layout.avatar.x, layout.avatar.y, layout.avatar.diameter), (150, 420, 70))
        self.assertEqual(layout.avatar.center, (185, 455))
        self.assertEqual((layout.name_run.x, layout.name_run.y), (240, 450))
        self.assertEqual((layout.handle_run.x, layout.handle_run.y), (240, 475))
        self.assertEqual((layout.counter_run.x, layout.counter_run.y), (980, 1040))

    def test_text_styles_and_colors(self):
        layout = build_layout("Work hard.", 0, 1, self.profile, self.theme, WRAP)
        self.assertEqual((layout.name_run.weight, layout.name_run.size), ("bold", 24))
        self.assertEqual((layout.handle_run.weight, layout.handle_run.size), ("normal", 20))
        self.assertEqual(layout.handle_run.color, self.theme.accent)
        self.assertEqual(layout.name_run.color, self.theme.text)
        self.assertEqual(layout.background, self.theme.background)
        quote = layout.quote_runs[0]
        self.assertEqual((quote.weight, quote.size, quote.color), ("bold", 48, self.theme.text))
        self.assertEqual((layout.counter_run.size, layout.counter_run.opacity), (18, 0.5))

    def test_quote_lines_stack_by_line_height(self):
        quote = "alpha beta gamma delta epsilon zeta eta theta iota kappa lambda"
        layout = build_layout(quote, 0, 1, self.profile, self.theme, WRAP)
        runs = layout.quote_runs
        self.assertGreater(len(runs), 1)
        for i, run in enumerate(runs):
            self.assertEqual((run.x, run.y), (150, QUOTE_START_Y + i * 62))
        self.assertEqual(" ".join(r.text for r in runs), quote)

    def test_counter_text(self):
        layout = build_layout("q", 1, 3, self.profile, self.theme, WRAP)
        self.assertEqual(layout.counter_run.text, "2 / 3")

    def test_avatar_carried_from_profile(self):
        profile = Profile(display_name="Ada", handle="@ada", avatar=b"png-bytes")
        layout = build_layout("q", 0, 1, profile, self.theme, WRAP)
        self.assertEqual(layout.avatar.image, b"png-bytes")
        self.assertEqual(layout.avatar.placeholder, (180, 180, 180))

    def test_index_out_of_range(self):
        with self.assertRaises(ValueError):
            build_layout("q", 2, 2, self.profile, self.theme, WRAP)
        with self.assertRaises(ValueError):
            build_layout("q", -1, 2, self.profile, self.theme, WRAP)

    def test_independent_builds_are_equal(self):
        deck = ["Work hard.", "Stay humble.", "Ship it every single day, no matter what happens."]
        first = build_deck_layouts(deck, self.profile, self.theme, WRAP)
        second = build_deck_layouts(deck, self.profile, self.theme, WRAP)
        self.assertEqual(first, second)
        self.assertEqual([l.index for l in first], [0, 1, 2])
        self.assertTrue(all(l.total == 3 for l in first))


if __name__ == "__main__":
    unittest.main()
