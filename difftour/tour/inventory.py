"""Hunk inventory utilities for difftour tour module.

Contains functions for presenting hunks to a model:
- format_hunks_for_llm: Number each hunk so it can be referenced by index
- check_inventory_size: Reject inventories above the size limit
"""

from difftour.tour.exceptions import DiffTooLargeError
from difftour.tour.models import Hunk

DEFAULT_MAX_DIFF_CHARS = 100_000


def format_hunks_for_llm(hunks: list[Hunk]) -> str:
    """Format hunks for inclusion in a model prompt.

    Each hunk is prefixed with "[Hunk N] <file>" where N is its 0-based
    position in the list.

    Args:
        hunks: Parsed hunks, in diff order

    Returns:
        Formatted string, hunks separated by a blank line
    """
    return "\n\n".join(
        f"[Hunk {index}] {hunk.file}\n{hunk.diff}" for index, hunk in enumerate(hunks)
    )


def check_inventory_size(inventory_text: str, max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> None:
    """Raise if the formatted inventory is too large.

    Args:
        inventory_text: Output of format_hunks_for_llm
        max_chars: Maximum allowed length

    Raises:
        DiffTooLargeError: If the inventory exceeds max_chars
    """
    if len(inventory_text) > max_chars:
        raise DiffTooLargeError(
            f"Diff is too large ({round(len(inventory_text) / 1024)}KB). "
            f"Try narrowing the diff, e.g.: git diff main -- src/"
        )
