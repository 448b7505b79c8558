import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

import numpy as np

from descstat import IncrementalTSVWriter, describe, describe_by_key, format_summary


class AncillaryUtilitiesTest(unittest.TestCase):
    def test_incremental_tsv_writer_writes_header_once(self) -> None:
        with TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "reports" / "summary.tsv"
            writer = IncrementalTSVWriter(target, "count\tmin")
            self.assertEqual(writer.append_rows(["1\t2"]), 1)
            self.assertEqual(writer.append_rows(["3\t4", ""]), 1)  # header should not repeat
            self.assertEqual(writer.append_rows([]), 0)

            content = target.read_text().splitlines()
            self.assertEqual(content, ["count\tmin", "1\t2", "3\t4"])

    def test_writer_does_not_repeat_header_for_existing_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "summary.tsv"
            IncrementalTSVWriter(target, "h").append_rows(["a"])
            IncrementalTSVWriter(target, "h").append_rows(["b"])

            self.assertEqual(target.read_text().splitlines(), ["h", "a", "b"])

    def test_writer_joins_field_sequences_with_tabs(self) -> None:
        with TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "summary.tsv"
            writer = IncrementalTSVWriter(target, ("source", "count"))
            self.assertEqual(writer.append_rows([("a.txt", 3), ["b.txt", "0"]]), 2)

            self.assertEqual(
                target.read_text().splitlines(),
                ["source\tcount", "a.txt\t3", "b.txt\t0"],
            )

    def test_writer_rejects_rows_that_break_the_layout(self) -> None:
        with TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "summary.tsv"
            writer = IncrementalTSVWriter(target, "source\tcount")

            with self.assertRaises(ValueError):
                writer.append_rows([("a\tb.txt", "1")])
            with self.assertRaises(ValueError):
                writer.append_rows(["a.txt\t1\nb.txt\t2"])
            with self.assertRaises(ValueError):
                IncrementalTSVWriter(target, ("multi\nline",))
            self.assertFalse(target.exists())

    def test_describe_builds_accumulator(self) -> None:
        stats = describe([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])

        self.assertEqual(stats.get_count(), 8)
        self.assertEqual(stats.get_mean(), 5.0)
        self.assertAlmostEqual(stats.get_standard_deviation(), 2.0, places=12)

    def test_describe_with_numpy_type_uses_type_minimum(self) -> None:
        stats = describe([], np.int16)
        self.assertEqual(stats.get_max(), np.iinfo(np.int16).min)
        self.assertEqual(format_summary(stats), "0\t\t\t\t")

    def test_describe_by_key_groups_in_first_seen_order(self) -> None:
        pairs = [
            ("cyclomatic", 3),
            ("nesting", 1),
            ("cyclomatic", 7),
            ("nesting", 2),
            ("cyclomatic", 5),
        ]
        groups = describe_by_key(pairs)

        self.assertEqual(list(groups), ["cyclomatic", "nesting"])
        self.assertEqual(groups["cyclomatic"].get_count(), 3)
        self.assertEqual(groups["cyclomatic"].get_sum(), 15)
        self.assertEqual(groups["cyclomatic"].get_min(), 3)
        self.assertEqual(groups["nesting"].get_max(), 2)


if __name__ == "__main__":  # pragma: no cover - convenience
    unittest.main()
