"""Hunk reference resolution for difftour tour module.

Contains:
- validate_hunk_ids: Filter hunk indices down to those that exist
- resolve_section: Resolve one grouping reference into a Section
- resolve_groups: Resolve a list of grouping references
- resolve_plan: Resolve a full TourPlanRef into a TourPlan
"""

import logging
from typing import Any, Iterable, TypeVar, Union

from pydantic import BaseModel, ValidationError

from difftour.tour.exceptions import SchemaViolationError
from difftour.tour.languages import infer_group_language
from difftour.tour.models import Hunk, Section, SectionRef, TourPlan, TourPlanRef

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def validate_hunk_ids(hunk_ids: Iterable[int], hunk_count: int) -> tuple[list[int], int]:
    """Keep only hunk indices that refer to an existing hunk.

    Models sometimes reference hunks that do not exist. Those indices are
    dropped rather than treated as errors.

    Args:
        hunk_ids: Indices in the order given by the model
        hunk_count: Number of parsed hunks

    Returns:
        Tuple of (valid indices in their original order, number dropped)
    """
    valid_ids: list[int] = []
    dropped = 0
    for hunk_id in hunk_ids:
        if 0 <= hunk_id < hunk_count:
            valid_ids.append(hunk_id)
        else:
            dropped += 1
    return valid_ids, dropped


def _coerce(model: type[_ModelT], value: Any, what: str) -> _ModelT:
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise SchemaViolationError(
            f"{what} does not match expected schema.\n"
            f"Error: {e}"
        ) from e


def resolve_section(hunks: list[Hunk], section_ref: Union[SectionRef, dict]) -> Section:
    """Resolve a single grouping reference into a Section.

    Args:
        hunks: All parsed hunks, in diff order
        section_ref: The grouping reference (model instance or raw dict)

    Returns:
        Section with copies of the referenced hunks, in hunk_ids order

    Raises:
        SchemaViolationError: If section_ref has the wrong shape
    """
    ref = _coerce(SectionRef, section_ref, "Grouping reference")

    valid_ids, dropped = validate_hunk_ids(ref.hunk_ids, len(hunks))
    if dropped:
        logger.debug(
            "Dropped %d unknown hunk id(s) from section %r", dropped, ref.heading
        )

    tour_hunks = [hunks[hunk_id].to_tour_hunk() for hunk_id in valid_ids]

    language = ref.language
    if not language:
        files = list(dict.fromkeys(hunk.file for hunk in tour_hunks))
        language = infer_group_language(files)

    return Section(
        heading=ref.heading,
        explanation=ref.explanation,
        hunks=tour_hunks,
        language=language,
    )


def resolve_groups(
    hunks: list[Hunk], group_refs: Iterable[Union[SectionRef, dict]]
) -> list[Section]:
    """Resolve grouping references into sections, keeping their order.

    Args:
        hunks: All parsed hunks, in diff order
        group_refs: Grouping references (model instances or raw dicts)

    Returns:
        One Section per grouping reference

    Raises:
        SchemaViolationError: If any grouping reference has the wrong shape
    """
    return [resolve_section(hunks, ref) for ref in group_refs]


def resolve_plan(hunks: list[Hunk], plan_ref: Union[TourPlanRef, dict]) -> TourPlan:
    """Resolve a full model response into a TourPlan.

    Args:
        hunks: All parsed hunks, in diff order
        plan_ref: The model's plan (model instance or raw dict)

    Returns:
        TourPlan with every section resolved

    Raises:
        SchemaViolationError: If plan_ref has the wrong shape
    """
    ref = _coerce(TourPlanRef, plan_ref, "Tour plan")
    return TourPlan(
        title=ref.title,
        summary=ref.summary,
        sections=resolve_groups(hunks, ref.sections),
    )
