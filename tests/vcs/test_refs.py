"""Tests for reference list extraction."""

from polyvcs.vcs.refs import (
    LEADING_NAME_PATTERN,
    TAG_PATTERN,
    branch_pattern,
    reference_list,
)

SHOW_REF_OUTPUT = """\
1111111111111111111111111111111111111111 refs/heads/main
abc123 refs/remotes/origin/main
def456 refs/remotes/origin/feature/x
2222222222222222222222222222222222222222 refs/remotes/upstream/release
abc123 refs/tags/v1.0.0
3333333333333333333333333333333333333333 refs/tags/v1.1.0-rc1
"""


class TestBranchExtraction:
    """Tests for remote-tracking branch extraction."""

    def test_branches_of_origin(self) -> None:
        """Test names are captured after the remote name, in output order."""
        output = "abc123 refs/remotes/origin/main\ndef456 refs/remotes/origin/feature/x\n"

        assert reference_list(output, branch_pattern("origin")) == ["main", "feature/x"]

    def test_branches_scoped_to_remote(self) -> None:
        """Test only branches of the requested remote are listed."""
        assert reference_list(SHOW_REF_OUTPUT, branch_pattern("upstream")) == ["release"]
        assert reference_list(SHOW_REF_OUTPUT, branch_pattern("origin")) == ["main", "feature/x"]

    def test_remote_name_is_escaped(self) -> None:
        """Test regex metacharacters in the remote name match literally."""
        output = "abc123 refs/remotes/my.remote/main\ndef456 refs/remotes/myxremote/other\n"

        assert reference_list(output, branch_pattern("my.remote")) == ["main"]

    def test_no_matches(self) -> None:
        """Test output without remote branches yields an empty list."""
        assert reference_list("abc123 refs/heads/main\n", branch_pattern("origin")) == []

    def test_empty_output(self) -> None:
        """Test empty output yields an empty list."""
        assert reference_list("", branch_pattern("origin")) == []


class TestTagExtraction:
    """Tests for tag extraction."""

    def test_single_tag(self) -> None:
        """Test a tag line yields its name."""
        assert reference_list("abc123 refs/tags/v1.0.0", TAG_PATTERN) == ["v1.0.0"]

    def test_tags_in_order(self) -> None:
        """Test every tag is listed in output order."""
        assert reference_list(SHOW_REF_OUTPUT, TAG_PATTERN) == ["v1.0.0", "v1.1.0-rc1"]

    def test_duplicates_are_kept(self) -> None:
        """Test repeated names are not deduplicated."""
        output = "abc123 refs/tags/v1\ndef456 refs/tags/v1\n"

        assert reference_list(output, TAG_PATTERN) == ["v1", "v1"]


class TestReferenceList:
    """Tests for the generic extraction helper."""

    def test_string_pattern_is_multiline(self) -> None:
        """Test string patterns anchor per line."""
        output = "v1.0                 3\nv1.1                 5\n"

        assert reference_list(output, r"^(\S+)") == ["v1.0", "v1.1"]

    def test_leading_name_pattern(self) -> None:
        """Test the leading-token pattern used for Bazaar tag output."""
        output = "release-1            12\nrelease-2            ?\n"

        assert reference_list(output, LEADING_NAME_PATTERN) == ["release-1", "release-2"]
