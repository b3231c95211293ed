"""Diff parser for difftour tour module.

Contains functions for splitting unified diff output into hunks:
- parse_diff: Parse raw diff text into an ordered list of Hunk objects
- parse_range_header: Compute the post-change line range of an @@ header
- _read_file_metadata: Scan the metadata block that follows a diff --git line
- _read_hunk: Collect one hunk body starting at its @@ header
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from difftour.tour.models import Hunk

logger = logging.getLogger(__name__)

FILE_BOUNDARY_PREFIX = "diff --git "
RANGE_HEADER_PREFIX = "@@"
NO_FILE = "/dev/null"

# @@ -old_start[,old_len] +new_start[,new_len] @@ optional context
_RANGE_HEADER_RE = re.compile(r"^@@ -\d+(?:,\d+)? \+(\d+)(?:,(\d+))? @@")


@dataclass
class _FileMetadata:
    """Paths and flags collected between a diff --git line and its first hunk."""

    old_path: str = ""
    new_path: str = ""
    is_binary: bool = False

    def resolve_path(self) -> Optional[str]:
        """Return the path hunks are attributed to, or None for degenerate entries.

        Deleted files (+++ /dev/null) keep their old path.
        """
        path = self.old_path if self.new_path == NO_FILE else self.new_path
        if not path or path == NO_FILE:
            return None
        return path


def _is_file_boundary(line: str) -> bool:
    return line.startswith(FILE_BOUNDARY_PREFIX)


def _strip_prefix(path: str, prefix: str) -> str:
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


def _skip_to_next_file(lines: list[str], index: int) -> int:
    """Advance to the next diff --git line (or the end of input)."""
    while index < len(lines) and not _is_file_boundary(lines[index]):
        index += 1
    return index


def _read_file_metadata(lines: list[str], index: int) -> tuple[_FileMetadata, int]:
    """Scan a file's metadata block.

    Args:
        lines: All lines of the diff
        index: Position just after the diff --git line

    Returns:
        Tuple of (metadata, position of the first @@ line or next file boundary)
    """
    metadata = _FileMetadata()

    while index < len(lines) and not _is_file_boundary(lines[index]):
        line = lines[index]

        if line.startswith("Binary files ") or line == "GIT binary patch":
            metadata.is_binary = True
        if line.startswith("--- "):
            metadata.old_path = _strip_prefix(line[4:], "a/")
        if line.startswith("+++ "):
            metadata.new_path = _strip_prefix(line[4:], "b/")
        if line.startswith(RANGE_HEADER_PREFIX):
            break
        index += 1

    return metadata, index


def parse_range_header(header: str) -> tuple[int, int]:
    """Compute the inclusive post-change line range announced by an @@ header.

    A missing count defaults to 1. Headers that do not match the expected
    format fall back to (1, 1).

    Args:
        header: The @@ header line

    Returns:
        Tuple of (start_line, end_line)
    """
    match = _RANGE_HEADER_RE.match(header)
    if not match:
        logger.debug("Malformed range header, defaulting to line 1: %r", header)
        return 1, 1

    # New-side start is 0 when the file no longer exists; clamp to line 1
    start_line = max(int(match.group(1)), 1)
    line_count = int(match.group(2)) if match.group(2) is not None else 1
    end_line = start_line + max(line_count - 1, 0)
    return start_line, end_line


def _read_hunk(lines: list[str], index: int, file_path: str) -> tuple[Hunk, int]:
    """Collect a hunk starting at its @@ header.

    Args:
        lines: All lines of the diff
        index: Position of the @@ header
        file_path: Path the hunk is attributed to

    Returns:
        Tuple of (Hunk, position of the next @@ line, file boundary or end)
    """
    header = lines[index]
    start_line, end_line = parse_range_header(header)

    hunk_lines = [header]
    index += 1
    while (
        index < len(lines)
        and not lines[index].startswith(RANGE_HEADER_PREFIX)
        and not _is_file_boundary(lines[index])
    ):
        hunk_lines.append(lines[index])
        index += 1

    # Drop trailing blank lines but always keep the header
    while len(hunk_lines) > 1 and hunk_lines[-1] == "":
        hunk_lines.pop()

    hunk = Hunk(
        file=file_path,
        start_line=start_line,
        end_line=end_line,
        header=header,
        diff="\n".join(hunk_lines),
    )
    return hunk, index


def parse_diff(raw_text: str) -> list[Hunk]:
    """Parse unified diff output (e.g. from 'git diff') into hunks.

    Never raises: anything that cannot be interpreted is skipped. Binary
    files and entries without a usable path produce no hunks.

    Args:
        raw_text: Raw diff text

    Returns:
        Hunks in the order they appear in the diff
    """
    hunks: list[Hunk] = []

    if not raw_text or not raw_text.strip():
        return hunks

    lines = raw_text.split("\n")
    index = 0

    while index < len(lines):
        # Seeking a file boundary
        if not _is_file_boundary(lines[index]):
            index += 1
            continue

        metadata, index = _read_file_metadata(lines, index + 1)

        if metadata.is_binary:
            logger.debug("Skipping binary file block: %s", metadata.new_path or metadata.old_path)
            index = _skip_to_next_file(lines, index)
            continue

        file_path = metadata.resolve_path()
        if file_path is None:
            logger.debug("Skipping file block without a usable path")
            index = _skip_to_next_file(lines, index)
            continue

        # Reading hunk bodies until the next file boundary
        while index < len(lines) and not _is_file_boundary(lines[index]):
            if not lines[index].startswith(RANGE_HEADER_PREFIX):
                index += 1
                continue
            hunk, index = _read_hunk(lines, index, file_path)
            hunks.append(hunk)

    logger.debug("Parsed %d hunks", len(hunks))
    return hunks
