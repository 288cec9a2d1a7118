"""Tests for diff-stat parsing and the DiffSummary model.

Tests cover:
- Per-file lines and binary detection
- Summary line termination and stop-at-summary behavior
- Blank line handling
- Parser state transitions
- Serialization to dict and markdown
"""

import unittest

from gitrefs.domain.diff_stat import (
    DiffStatParser,
    DiffSummary,
    FileChange,
    ParseState,
    parse_diff_stat,
)

SAMPLE_STAT = (
    " file_a.txt | 3 +--\n"
    " file_b.bin | Bin 100 -> 200 bytes\n"
    " 3 files changed, 1 insertion(+), 2 deletions(-)\n"
)


class TestParseDiffStat(unittest.TestCase):
    """Tests for parse_diff_stat."""

    def test_parses_text_and_binary_files_and_summary(self):
        changes, summary = parse_diff_stat(SAMPLE_STAT)

        self.assertEqual(
            changes,
            [FileChange("file_a.txt", False), FileChange("file_b.bin", True)],
        )
        self.assertEqual(summary, "3 files changed, 1 insertion(+), 2 deletions(-)")

    def test_empty_output_yields_nothing(self):
        changes, summary = parse_diff_stat("")

        self.assertEqual(changes, [])
        self.assertEqual(summary, "")

    def test_blank_lines_do_not_terminate_or_add_entries(self):
        stat = "\n a.py | 1 +\n\n b.py | 2 +-\n 2 files changed, 2 insertions(+), 1 deletion(-)\n"

        changes, summary = parse_diff_stat(stat)

        self.assertEqual([c.path for c in changes], ["a.py", "b.py"])
        self.assertEqual(summary, "2 files changed, 2 insertions(+), 1 deletion(-)")

    def test_stops_at_first_line_without_separator(self):
        """Test that file lines after the summary are ignored."""
        stat = (
            " a.py | 1 +\n"
            " 1 file changed, 1 insertion(+)\n"
            " late.py | 4 ++++\n"
            " something else\n"
        )

        changes, summary = parse_diff_stat(stat)

        self.assertEqual([c.path for c in changes], ["a.py"])
        self.assertEqual(summary, "1 file changed, 1 insertion(+)")

    def test_non_contiguous_stat_block_is_cut_short(self):
        """Test that a stray line before the file lines becomes the summary."""
        changes, summary = parse_diff_stat("warning: something\n a.py | 1 +\n")

        self.assertEqual(changes, [])
        self.assertEqual(summary, "warning: something")

    def test_path_is_text_before_first_separator(self):
        changes, _ = parse_diff_stat("   dir/name with spaces.txt   | 10 ++++++++++\n")

        self.assertEqual(changes[0].path, "dir/name with spaces.txt")
        self.assertFalse(changes[0].is_binary)

    def test_rename_lines_keep_arrow_in_path(self):
        changes, _ = parse_diff_stat(" old.txt => new.txt | 0\n")

        self.assertEqual(changes[0].path, "old.txt => new.txt")

    def test_binary_requires_bin_after_separator(self):
        changes, _ = parse_diff_stat(" Bin/tool.sh | 2 +-\n")

        self.assertFalse(changes[0].is_binary)

    def test_preserves_output_order(self):
        stat = " z.txt | 1 +\n a.txt | 1 +\n m.txt | 1 +\n 3 files changed, 3 insertions(+)\n"

        changes, _ = parse_diff_stat(stat)

        self.assertEqual([c.path for c in changes], ["z.txt", "a.txt", "m.txt"])


class TestDiffStatParser(unittest.TestCase):
    """Tests for the DiffStatParser state machine."""

    def test_starts_scanning_files(self):
        parser = DiffStatParser()

        self.assertIs(parser.state, ParseState.SCANNING_FILES)

    def test_file_and_blank_lines_keep_scanning(self):
        parser = DiffStatParser()

        self.assertIs(parser.feed(" a.py | 1 +"), ParseState.SCANNING_FILES)
        self.assertIs(parser.feed(""), ParseState.SCANNING_FILES)
        self.assertEqual(len(parser.changes), 1)

    def test_summary_line_switches_state(self):
        parser = DiffStatParser()

        state = parser.feed(" 1 file changed, 1 insertion(+)")

        self.assertIs(state, ParseState.SUMMARY_FOUND)
        self.assertEqual(parser.summary_line, "1 file changed, 1 insertion(+)")

    def test_lines_after_summary_are_ignored(self):
        parser = DiffStatParser()
        parser.feed(" done")

        parser.feed(" b.py | 1 +")
        parser.feed(" another summary")

        self.assertEqual(parser.changes, [])
        self.assertEqual(parser.summary_line, "done")


class TestDiffSummary(unittest.TestCase):
    """Tests for the DiffSummary model."""

    def _summary(self) -> DiffSummary:
        return DiffSummary(
            source_label="main",
            target_label="feature",
            source_commit_id="aaa",
            target_commit_id="bbb",
            changes=[FileChange("a.txt"), FileChange("logo.png", is_binary=True)],
            summary_line="2 files changed, 1 insertion(+)",
        )

    def test_convenience_properties(self):
        summary = self._summary()

        self.assertEqual(summary.file_paths, ["a.txt", "logo.png"])
        self.assertEqual(summary.binary_files, [FileChange("logo.png", True)])
        self.assertFalse(summary.has_error)

    def test_to_dict(self):
        data = self._summary().to_dict()

        self.assertEqual(data["source"], "main")
        self.assertEqual(data["target_commit_id"], "bbb")
        self.assertEqual(
            data["changes"],
            [
                {"path": "a.txt", "is_binary": False},
                {"path": "logo.png", "is_binary": True},
            ],
        )
        self.assertEqual(data["summary"], "2 files changed, 1 insertion(+)")
        self.assertIsNone(data["error"])

    def test_to_markdown_lists_files_and_summary(self):
        text = self._summary().to_markdown()

        self.assertIn("`a.txt`", text)
        self.assertIn("`logo.png` (binary)", text)
        self.assertIn("2 files changed, 1 insertion(+)", text)

    def test_to_markdown_shows_error(self):
        summary = DiffSummary(
            source_label="main", target_label="nope", error_message="branch missing"
        )

        self.assertTrue(summary.has_error)
        self.assertIn("**Error:** branch missing", summary.to_markdown())

    def test_to_markdown_without_changes(self):
        summary = DiffSummary(source_label="main", target_label="main")

        self.assertIn("_No changes._", summary.to_markdown())


if __name__ == "__main__":
    unittest.main()
