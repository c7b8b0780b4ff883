import unittest

from app.pathcanon.normalize.segmenter import resolve_root, split_segments

CWD = r"C:\Work\Project"


class TestSplitSegments(unittest.TestCase):
    def test_none_passes_through(self) -> None:
        self.assertIsNone(split_segments(None))

    def test_blank_input_is_single_empty_segment(self) -> None:
        self.assertEqual(split_segments(""), [""])
        self.assertEqual(split_segments(" \t "), [""])

    def test_splits_on_both_separators_and_trims(self) -> None:
        self.assertEqual(
            split_segments("C:\\ a /b\t\\\\c "),
            ["C:", "a", "b", "", "c"],
        )


class TestResolveRoot(unittest.TestCase):
    def test_blank_becomes_working_directory(self) -> None:
        self.assertEqual(resolve_root([""], CWD), ["C:", "Work", "Project"])

    def test_leading_separator_means_current_drive(self) -> None:
        self.assertEqual(resolve_root(["", "Fake"], r"D:\x"), ["D:", "Fake"])
        self.assertEqual(resolve_root(["", ""], CWD), ["C:", ""])

    def test_bare_drive_gets_working_directory(self) -> None:
        self.assertEqual(resolve_root(["c:"], CWD), ["C:", "Work", "Project"])

    def test_bare_drive_followed_by_segments_is_absolute(self) -> None:
        self.assertEqual(resolve_root(["c:", "a"], CWD), ["C:", "a"])

    def test_other_drive_still_uses_working_directory_chain(self) -> None:
        self.assertEqual(resolve_root(["z:"], CWD), ["Z:", "Work", "Project"])

    def test_whitespace_inside_drive_is_removed(self) -> None:
        self.assertEqual(resolve_root(["C  :", "a"], CWD), ["C:", "a"])

    def test_drive_relative_folder_is_hoisted(self) -> None:
        self.assertEqual(
            resolve_root(["C:some folder", "x"], CWD),
            ["C:", "Work", "Project", "some folder", "x"],
        )
        self.assertEqual(resolve_root(["d : sub"], CWD), ["D:", "Work", "Project", "sub"])

    def test_relative_path_keeps_dot_segments(self) -> None:
        self.assertEqual(
            resolve_root(["..", ".", "a"], CWD),
            ["C:", "Work", "Project", "..", ".", "a"],
        )

    def test_non_letter_drive_allowed(self) -> None:
        self.assertEqual(resolve_root(["5:", "my"], CWD), ["5:", "my"])

    def test_input_list_not_mutated(self) -> None:
        segments = ["a"]
        resolve_root(segments, CWD)
        self.assertEqual(segments, ["a"])


if __name__ == "__main__":
    unittest.main()
