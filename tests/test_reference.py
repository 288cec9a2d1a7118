"""Tests for reference domain models.

Tests cover:
- Short-name reduction of branch and tag refspecs
- Parsing of show-ref output lines
- Option defaults
"""

import unittest

from gitrefs.domain.reference import (
    REFS_HEADS,
    REFS_TAGS,
    DeleteBranchOptions,
    Reference,
    ShowRefOptions,
    ShowRefVerifyOptions,
    SymbolicRefOptions,
    ref_short_name,
)


class TestRefShortName(unittest.TestCase):
    """Tests for ref_short_name."""

    def test_strips_heads_prefix(self):
        self.assertEqual(ref_short_name("refs/heads/main"), "main")

    def test_strips_tags_prefix(self):
        self.assertEqual(ref_short_name("refs/tags/v1.0.0"), "v1.0.0")

    def test_keeps_nested_branch_names(self):
        self.assertEqual(ref_short_name("refs/heads/feature/login"), "feature/login")

    def test_returns_other_refs_unchanged(self):
        self.assertEqual(
            ref_short_name("refs/remotes/origin/main"), "refs/remotes/origin/main"
        )
        self.assertEqual(ref_short_name("HEAD"), "HEAD")
        self.assertEqual(ref_short_name(""), "")

    def test_prefix_must_be_at_start(self):
        """Test that a prefix appearing mid-string is not stripped."""
        self.assertEqual(ref_short_name("x/refs/heads/main"), "x/refs/heads/main")

    def test_strips_only_one_prefix(self):
        """Test that a branch named like a tag refspec keeps the inner prefix."""
        self.assertEqual(ref_short_name("refs/heads/refs/tags/v1"), "refs/tags/v1")

    def test_reducing_a_short_name_again_is_a_no_op(self):
        once = ref_short_name("refs/heads/main")
        self.assertEqual(ref_short_name(once), once)

    def test_prefix_constants(self):
        self.assertEqual(REFS_HEADS, "refs/heads/")
        self.assertEqual(REFS_TAGS, "refs/tags/")


class TestReference(unittest.TestCase):
    """Tests for the Reference model."""

    def test_from_show_ref_line_parses_two_fields(self):
        ref = Reference.from_show_ref_line("abc123 refs/heads/main")

        self.assertEqual(ref, Reference(id="abc123", refspec="refs/heads/main"))

    def test_from_show_ref_line_accepts_extra_whitespace(self):
        ref = Reference.from_show_ref_line("  abc123\t refs/tags/v1  ")

        self.assertEqual(ref.id, "abc123")
        self.assertEqual(ref.refspec, "refs/tags/v1")

    def test_from_show_ref_line_rejects_three_fields(self):
        self.assertIsNone(Reference.from_show_ref_line("abc123 refs/heads/main extra"))

    def test_from_show_ref_line_rejects_blank_and_single_field(self):
        self.assertIsNone(Reference.from_show_ref_line(""))
        self.assertIsNone(Reference.from_show_ref_line("   "))
        self.assertIsNone(Reference.from_show_ref_line("abc123"))

    def test_short_name_and_kind(self):
        branch = Reference(id="1", refspec="refs/heads/dev")
        tag = Reference(id="2", refspec="refs/tags/v2")

        self.assertEqual(branch.short_name, "dev")
        self.assertTrue(branch.is_branch)
        self.assertFalse(branch.is_tag)
        self.assertEqual(tag.short_name, "v2")
        self.assertTrue(tag.is_tag)

    def test_to_dict(self):
        ref = Reference(id="abc", refspec="refs/heads/main")

        self.assertEqual(ref.to_dict(), {"id": "abc", "refspec": "refs/heads/main"})


class TestOptionDefaults(unittest.TestCase):
    """Tests for operation option defaults."""

    def test_symbolic_ref_defaults_to_head_read(self):
        options = SymbolicRefOptions()

        self.assertEqual(options.name, "HEAD")
        self.assertIsNone(options.ref)
        self.assertIsNone(options.timeout)

    def test_show_ref_defaults_list_everything(self):
        options = ShowRefOptions()

        self.assertFalse(options.heads)
        self.assertFalse(options.tags)
        self.assertEqual(options.patterns, ())

    def test_delete_branch_is_safe_by_default(self):
        self.assertFalse(DeleteBranchOptions().force)

    def test_verify_uses_runner_default_timeout(self):
        self.assertIsNone(ShowRefVerifyOptions().timeout)


if __name__ == "__main__":
    unittest.main()
