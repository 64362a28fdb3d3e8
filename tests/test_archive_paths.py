from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory
import unittest

from workreport.archive import archive_subpath, content_changed, is_dated_report_name

from tests.helpers import write_text


class TestArchiveSubpath(unittest.TestCase):
    def test_year_and_month_come_from_leading_digits(self) -> None:
        self.assertEqual("Archive/2020/08", archive_subpath("20200826.txt"))
        self.assertEqual("Archive/1999/12", archive_subpath("19991231.txt"))

    def test_month_is_not_calendar_checked(self) -> None:
        self.assertEqual("Archive/2020/13", archive_subpath("20201345.txt"))

    def test_trailing_text_after_date_is_accepted(self) -> None:
        self.assertEqual("Archive/2021/03", archive_subpath("20210304-notes.txt"))

    def test_rejects_names_without_date_prefix_or_extension(self) -> None:
        for name in ("notes.txt", "202008.txt", "2020a826.txt", "20200826.md", "20200826", "２０２００８２６.txt"):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    archive_subpath(name)


class TestDatedReportName(unittest.TestCase):
    def test_accepts_exactly_eight_digits(self) -> None:
        self.assertTrue(is_dated_report_name("20200826.txt"))

    def test_rejects_other_shapes(self) -> None:
        for name in ("notes.txt", "Template.txt", "202008.txt", "202008261.txt", "20200826.TXT", "x20200826.txt", "20200826.txt.bak"):
            with self.subTest(name=name):
                self.assertFalse(is_dated_report_name(name))


class TestContentChanged(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_identical_contents_are_unchanged(self) -> None:
        a = write_text(self.root / "a.txt", "same\n")
        b = write_text(self.root / "b.txt", "same\n")
        self.assertFalse(content_changed(a, b))

    def test_different_contents_are_changed(self) -> None:
        a = write_text(self.root / "a.txt", "before\n")
        b = write_text(self.root / "b.txt", "after\n")
        self.assertTrue(content_changed(a, b))

    def test_line_ending_change_counts(self) -> None:
        a = write_text(self.root / "a.txt", "line\n")
        b = write_text(self.root / "b.txt", "line\r\n")
        self.assertTrue(content_changed(a, b))

    def test_missing_file_raises(self) -> None:
        a = write_text(self.root / "a.txt", "x")
        with self.assertRaises(FileNotFoundError):
            content_changed(a, self.root / "missing.txt")

    def test_non_utf8_file_raises(self) -> None:
        a = write_text(self.root / "a.txt", "x")
        b = self.root / "b.txt"
        b.write_bytes(b"\xff\xfe\x00bad")
        with self.assertRaises(UnicodeDecodeError):
            content_changed(a, b)


if __name__ == "__main__":
    unittest.main()
