"""Extraction of branch and tag names from reference dumps.

The functions here are pure: they operate on captured command output so the
parsing can be tested against literal strings without running any tool.
"""

import re

# Matches the tag segment of a ref path, e.g. "abc123 refs/tags/v1.0.0"
TAG_PATTERN = re.compile(r"(?:tags)/(\S+)$", re.MULTILINE)

# Matches the first whitespace-delimited token of every line, e.g. "v1.0   12"
LEADING_NAME_PATTERN = re.compile(r"^(\S+)", re.MULTILINE)


def branch_pattern(remote_name: str) -> re.Pattern[str]:
    """Build the pattern matching remote-tracking branches of a remote.

    Args:
        remote_name: Remote tracking name (e.g. 'origin')

    Returns:
        Compiled pattern capturing the branch name after '<remote_name>/'
    """
    return re.compile(rf"(?:{re.escape(remote_name)})/(\S+)$", re.MULTILINE)


def reference_list(output: str, pattern: str | re.Pattern[str]) -> list[str]:
    """Extract reference names from raw command output.

    Args:
        output: Raw output of a "show all references" command
        pattern: Pattern whose first group captures the reference name.
            String patterns are compiled in multiline mode.

    Returns:
        Captured names in the order they appear in the output
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.MULTILINE)
    return [match.group(1) for match in pattern.finditer(output)]
