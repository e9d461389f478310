import re
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from carousel_core.naming import (
    PAGED_FALLBACK,
    RASTER_FALLBACK,
    archive_filename,
    derive_name,
    paged_filename,
)

_SAFE = re.compile(r"^[a-z0-9-]*$")

SAMPLES = [
    "Work hard.",
    "The opportunity you're looking for is in the hard work you're avoiding.",
    "  Leading and trailing   spaces  ",
    "Already-dashed - words -- here",
    "Tabs\tand\tother spaces",
    "!!!",
    "🚀🔥",
    "",
    "x" * 80,
    "ends with a space right at the fifty character mark ok",
]


class DeriveNameTests(unittest.TestCase):
    def test_simple_quote(self):
        self.assertEqual(derive_name("Work hard.", PAGED_FALLBACK), "work-hard")

    def test_truncates_to_fifty(self):
        name = derive_name("x" * 80, PAGED_FALLBACK)
        self.assertEqual(name, "x" * 50)

    def test_no_trailing_dash_after_truncation(self):
        quote = "a" * 49 + " bcdef"
        self.assertEqual(derive_name(quote, PAGED_FALLBACK), "a" * 49)

    def test_fallback_when_nothing_survives(self):
        self.assertEqual(derive_name("!!! ???", PAGED_FALLBACK), PAGED_FALLBACK)
        self.assertEqual(derive_name("🚀🔥", RASTER_FALLBACK), RASTER_FALLBACK)

    def test_always_safe_and_non_empty(self):
        for sample in SAMPLES:
            name = derive_name(sample, PAGED_FALLBACK)
            self.assertTrue(name)
            self.assertRegex(name, _SAFE)

    def test_idempotent(self):
        for sample in SAMPLES:
            once = derive_name(sample, RASTER_FALLBACK)
            self.assertEqual(derive_name(once, RASTER_FALLBACK), once)

    def test_extensions(self):
        self.assertEqual(paged_filename("work-hard"), "work-hard.pdf")
        self.assertEqual(archive_filename("work-hard"), "work-hard-images.zip")


if __name__ == "__main__":
    unittest.main()
