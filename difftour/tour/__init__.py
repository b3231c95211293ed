"""Tour feature for difftour - split a diff into hunks and group them.

This package provides:
- models: Hunk, TourHunk, SectionRef, Section, TourPlanRef, TourPlan
- parser: parse_diff, parse_range_header
- languages: EXTENSION_LANGUAGES, infer_language, infer_group_language
- resolver: validate_hunk_ids, resolve_section, resolve_groups, resolve_plan
- inventory: format_hunks_for_llm, check_inventory_size
- prompt: TOUR_SYSTEM_PROMPT, build_tour_prompt
- exceptions: TourError, SchemaViolationError, DiffTooLargeError
"""

# Models
from difftour.tour.models import (
    Hunk,
    Section,
    SectionRef,
    TourHunk,
    TourPlan,
    TourPlanRef,
)

# Exceptions
from difftour.tour.exceptions import (
    DiffTooLargeError,
    SchemaViolationError,
    TourError,
)

# Parser
from difftour.tour.parser import (
    parse_diff,
    parse_range_header,
)

# Languages
from difftour.tour.languages import (
    EXTENSION_LANGUAGES,
    infer_group_language,
    infer_language,
)

# Resolver
from difftour.tour.resolver import (
    resolve_groups,
    resolve_plan,
    resolve_section,
    validate_hunk_ids,
)

# Inventory
from difftour.tour.inventory import (
    DEFAULT_MAX_DIFF_CHARS,
    check_inventory_size,
    format_hunks_for_llm,
)

# Prompt
from difftour.tour.prompt import (
    TOUR_SYSTEM_PROMPT,
    build_tour_prompt,
)


__all__ = [
    # Models
    "Hunk",
    "TourHunk",
    "SectionRef",
    "Section",
    "TourPlanRef",
    "TourPlan",
    # Exceptions
    "TourError",
    "SchemaViolationError",
    "DiffTooLargeError",
    # Parser
    "parse_diff",
    "parse_range_header",
    # Languages
    "EXTENSION_LANGUAGES",
    "infer_language",
    "infer_group_language",
    # Resolver
    "validate_hunk_ids",
    "resolve_section",
    "resolve_groups",
    "resolve_plan",
    # Inventory
    "DEFAULT_MAX_DIFF_CHARS",
    "format_hunks_for_llm",
    "check_inventory_size",
    # Prompt
    "TOUR_SYSTEM_PROMPT",
    "build_tour_prompt",
]
