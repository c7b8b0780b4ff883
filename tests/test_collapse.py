import unittest

from app.pathcanon.normalize.collapse import remove_dot_segments, remove_empty_segments


class TestCollapse(unittest.TestCase):
    def test_remove_empty_keeps_root(self) -> None:
        segments = ["C:", "", "a", "", "", "b", ""]
        remove_empty_segments(segments)
        self.assertEqual(segments, ["C:", "a", "b"])

    def test_single_dots_removed(self) -> None:
        segments = ["C:", ".", "a", ".", "b", "."]
        remove_dot_segments(segments)
        self.assertEqual(segments, ["C:", "a", "b"])

    def test_double_dot_removes_previous(self) -> None:
        segments = ["C:", "a", "b", "..", "c"]
        remove_dot_segments(segments)
        self.assertEqual(segments, ["C:", "a", "c"])

    def test_consecutive_double_dots(self) -> None:
        segments = ["C:", "a", "b", "..", "..", "c"]
        remove_dot_segments(segments)
        self.assertEqual(segments, ["C:", "c"])

    def test_double_dot_clamped_at_root(self) -> None:
        segments = ["C:", "..", "..", "a", "..", "..", "b"]
        remove_dot_segments(segments)
        self.assertEqual(segments, ["C:", "b"])

    def test_mixed_dots(self) -> None:
        segments = ["C:", "a", ".", "..", "b", ".", "c", ".."]
        remove_dot_segments(segments)
        self.assertEqual(segments, ["C:", "b"])

    def test_triple_dot_is_not_a_dot_segment(self) -> None:
        segments = ["C:", "a", "..."]
        remove_dot_segments(segments)
        self.assertEqual(segments, ["C:", "a", "..."])


if __name__ == "__main__":
    unittest.main()
