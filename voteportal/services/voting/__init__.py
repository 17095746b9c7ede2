from voteportal.services.voting.analytics import (
    category_flow,
    completion_rate,
    district_breakdown,
    hourly_pattern,
    peak_hour,
    summarize,
    top_district,
)
from voteportal.services.voting.tally import (
    participation_rate,
    tally_catalog,
    tally_category,
)

__all__ = [
    "category_flow",
    "completion_rate",
    "district_breakdown",
    "hourly_pattern",
    "participation_rate",
    "peak_hour",
    "summarize",
    "tally_catalog",
    "tally_category",
    "top_district",
]
