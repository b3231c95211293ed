"""Tour prompt utilities for difftour tour module.

Contains:
- TOUR_SYSTEM_PROMPT: System prompt for tour planning
- build_tour_prompt: Build the user prompt for tour planning
"""

from typing import Optional

from difftour.tour.inventory import (
    DEFAULT_MAX_DIFF_CHARS,
    check_inventory_size,
    format_hunks_for_llm,
)
from difftour.tour.models import Hunk


TOUR_SYSTEM_PROMPT = """You are a code review assistant producing a guided tour of a diff.

Your task is to help a reviewer understand the changes:
- Group related hunks into logical sections, even across files
- Order the sections narratively, starting with the foundational change
- Reference hunks ONLY by the [Hunk N] index numbers provided

Output ONLY valid JSON matching the required schema. No markdown fences or commentary."""


def build_tour_prompt(
    hunks: list[Hunk],
    title: Optional[str] = None,
    max_chars: int = DEFAULT_MAX_DIFF_CHARS,
) -> str:
    """Build the user prompt for tour planning.

    Args:
        hunks: Parsed hunks, in diff order
        title: Exact title to use, or None to let the model choose one
        max_chars: Maximum size of the formatted hunk inventory

    Returns:
        User prompt string

    Raises:
        DiffTooLargeError: If the formatted hunks exceed max_chars
    """
    inventory_text = format_hunks_for_llm(hunks)
    check_inventory_size(inventory_text, max_chars)

    if title:
        title_instruction = f'Use this exact title for the tour: "{title}".'
    else:
        title_instruction = "Generate a concise, descriptive title for the tour."

    prompt = f"""Analyze the following git diff and produce a guided tour that helps a reviewer understand the changes.

{title_instruction}

[INSTRUCTIONS]
1. Group related hunks into logical sections (e.g., "these hunks across files all implement input validation")
2. Order the sections narratively: start with the foundational change, then build understanding
3. Write a short heading and 2-4 sentence explanation for each section
4. Generate a one-paragraph summary of the overall change
5. Reference hunks by their [Hunk N] index numbers; do NOT copy the diff text

[OUTPUT SCHEMA]
Return a JSON object with this exact structure:
{{
  "title": "<concise title>",
  "summary": "<one paragraph summary>",
  "sections": [
    {{
      "heading": "<short section heading>",
      "explanation": "<2-4 sentences explaining this group of changes>",
      "hunk_ids": [0, 3, 5],
      "language": "<optional, dominant source language, e.g. typescript, python, rust>"
    }}
  ]
}}

[HUNKS]
Total hunks: {len(hunks)}

{inventory_text}

Output ONLY the JSON object:"""

    return prompt
