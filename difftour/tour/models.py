"""Data models for difftour tour module.

Contains:
- Hunk: A single parsed hunk of a unified diff
- TourHunk: Read-only copy of a hunk handed to downstream consumers
- SectionRef: Grouping reference returned by a model (hunks by index)
- Section: Grouping reference resolved into hunk copies
- TourPlanRef: The full model response referencing hunks by index
- TourPlan: The full tour with every section resolved
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


@dataclass(frozen=True)
class Hunk:
    """A single hunk parsed from a unified diff."""

    file: str
    start_line: int  # First line in the post-change file (1-based)
    end_line: int  # Inclusive
    header: str  # The @@ ... @@ line
    diff: str  # Header plus body, trailing blank lines removed

    def to_tour_hunk(self) -> "TourHunk":
        """Copy the fields downstream consumers need into a TourHunk."""
        return TourHunk(
            file=self.file,
            start_line=self.start_line,
            end_line=self.end_line,
            diff=self.diff,
        )


class TourHunk(BaseModel):
    """Read-only copy of a hunk inside a resolved section.

    Serialised with camelCase keys (startLine, endLine) via by_alias=True.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    file: str
    start_line: int = Field(alias="startLine")
    end_line: int = Field(alias="endLine")
    diff: str


class SectionRef(BaseModel):
    """A section as returned by the model: heading, explanation and hunk indices."""

    heading: str
    explanation: str
    hunk_ids: list[StrictInt]  # "1" and true are rejected, not coerced
    language: Optional[str] = None


class Section(BaseModel):
    """A section whose hunk indices have been resolved to hunk copies."""

    heading: str
    explanation: str
    hunks: list[TourHunk]
    language: Optional[str] = None


class TourPlanRef(BaseModel):
    """The full model response, with sections referencing hunks by index."""

    title: str
    summary: str
    sections: list[SectionRef]


class TourPlan(BaseModel):
    """The full tour with every section resolved."""

    title: str
    summary: str
    sections: list[Section]
