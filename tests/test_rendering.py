import math
import unittest

from descstat import Descriptive, format_summary, get_header
from descstat.rendering import SUMMARY_FIELDS


class RenderingTest(unittest.TestCase):
    def test_summary_line_field_order(self) -> None:
        stats = Descriptive()
        stats.extend([1, 2, 3, 4, 5])

        line = format_summary(stats)
        self.assertEqual(
            line.split("\t"),
            ["5", "1", "3.0", "5", str(math.sqrt(2))],
        )
        self.assertEqual(str(stats), line)

    def test_empty_accumulator_renders_blank_fields(self) -> None:
        self.assertEqual(format_summary(Descriptive()), "0\t\t\t\t")
        self.assertEqual(format_summary(Descriptive(), median=True), "0\t\t\t\t\t")

    def test_median_column_is_appended(self) -> None:
        stats = Descriptive()
        stats.extend([4, 1, 3, 2])

        fields = format_summary(stats, median=True).split("\t")
        self.assertEqual(len(fields), 6)
        self.assertEqual(fields[-1], "3.5")

    def test_single_value_renders_zero_deviation(self) -> None:
        stats = Descriptive()
        stats.add(42)
        self.assertEqual(format_summary(stats), "1\t42\t42.0\t42\t0.0")

    def test_header(self) -> None:
        self.assertEqual(get_header(), "count\tmin\tmean\tmax\tsd")
        self.assertEqual(
            get_header(SUMMARY_FIELDS + ("median",), prefix=("source",)),
            "source\tcount\tmin\tmean\tmax\tsd\tmedian",
        )


if __name__ == "__main__":  # pragma: no cover - convenience
    unittest.main()
