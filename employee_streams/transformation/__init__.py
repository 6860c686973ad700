"""
Transformation Layer - Pure, Deterministic Functions

This layer contains all collection processing over employee records.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""

from .transformers import (
    EFFECTIVE_RATING_THRESHOLD,
    filter_by_rating_above,
    format_low_rated,
    average_rating,
    merge_and_rank,
    paginate,
    join_names,
    has_duplicate_names,
    average_rating_by_position,
    count_by_effectiveness,
    names_by_effectiveness,
    get_summary_stats,
)
from .validators import (
    validate_employee_schema,
    validate_data_quality,
    validate_business_rules,
)
