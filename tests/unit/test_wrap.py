import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from carousel_renderer.wrap import wrap_text


def char_width(text: str) -> float:
    return float(len(text))


class WrapTextTests(unittest.TestCase):
    def test_greedy_fill(self):
        self.assertEqual(wrap_text("a bb ccc", 4, char_width), ["a bb", "ccc"])

    def test_exact_fit_stays_on_line(self):
        self.assertEqual(wrap_text("abc def", 7, char_width), ["abc def"])

    def test_oversized_word_is_emitted_alone_unsplit(self):
        lines = wrap_text("hi supercalifragilistic yo", 10, char_width)
        self.assertEqual(lines, ["hi", "supercalifragilistic", "yo"])

    def test_oversized_first_word(self):
        self.assertEqual(wrap_text("supercalifragilistic", 5, char_width), ["supercalifragilistic"])

    def test_space_runs_collapse(self):
        self.assertEqual(wrap_text("  a    b  ", 100, char_width), ["a b"])

    def test_non_breaking_space_joins_words(self):
        lines = wrap_text("pay 100\xa0EUR now", 8, char_width)
        self.assertEqual(lines, ["pay", "100\xa0EUR", "now"])

    def test_empty_text(self):
        self.assertEqual(wrap_text("", 100, char_width), [])
        self.assertEqual(wrap_text("   ", 100, char_width), [])

    def test_lines_never_exceed_width_except_single_words(self):
        texts = [
            "The opportunity you're looking for is in the hard work you're avoiding.",
            "Success is not about luck, it's about consistency.",
            "x " * 40,
            "tiny words and one enormousunbreakablewordthatoverflows here",
        ]
        for width in (5, 12, 20, 33):
            for text in texts:
                for line in wrap_text(text, width, char_width):
                    if char_width(line) > width:
                        self.assertNotIn(" ", line)

    def test_words_preserved_in_order(self):
        text = "one two three four five six seven"
        lines = wrap_text(text, 9, char_width)
        self.assertEqual(" ".join(lines).split(), text.split())

    def test_deterministic(self):
        text = "Your future is created by what you do today, not tomorrow."
        self.assertEqual(wrap_text(text, 17, char_width), wrap_text(text, 17, char_width))


if __name__ == "__main__":
    unittest.main()
