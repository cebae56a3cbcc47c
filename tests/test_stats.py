import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_analyzer.features.stats import collect_stats  # noqa: E402


class StatisticsTests(unittest.TestCase):
    def test_thousand_words_gives_two_pages_and_five_minutes(self):
        stats = collect_stats(" ".join(["word"] * 1000))
        self.assertEqual(stats.word_count, 1000)
        self.assertEqual(stats.estimated_pages, 2)
        self.assertEqual(stats.reading_time_min, 5)

    def test_page_estimate_rounds_half_up(self):
        stats = collect_stats(" ".join(["word"] * 1250))
        self.assertEqual(stats.estimated_pages, 3)
        self.assertEqual(stats.reading_time_min, 6)

    def test_empty_text_has_minimum_page_and_reading_time(self):
        stats = collect_stats("")
        self.assertEqual(stats.word_count, 0)
        self.assertEqual(stats.estimated_pages, 1)
        self.assertEqual(stats.reading_time_min, 1)
        self.assertEqual(
            (stats.bullet_lines, stats.emails, stats.phones, stats.links, stats.dates),
            (0, 0, 0, 0, 0),
        )

    def test_counts_bullet_lines(self):
        text = "- first\n* second\n   • third\nplain line\n-fourth\nnot - a bullet"
        self.assertEqual(collect_stats(text).bullet_lines, 4)

    def test_counts_contact_and_link_patterns(self):
        text = (
            "jane@example.com\n"
            "+1 555-123-4567\n"
            "https://jane.dev and http://example.org/about"
        )
        stats = collect_stats(text)
        self.assertEqual(stats.emails, 1)
        self.assertEqual(stats.phones, 1)
        self.assertEqual(stats.links, 2)

    def test_counts_years_and_month_year_dates(self):
        stats = collect_stats("Engineer, Jan 2020 - Mar. 2021\nGraduated 2019\nSeptember 2015")
        self.assertEqual(stats.dates, 4)


if __name__ == "__main__":
    unittest.main()
