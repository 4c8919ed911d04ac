"""News feed generation from trait evidence and game events."""

from .generator import (
    NewsGenerator,
    describe_event,
    fill_slots,
    sort_news_by_priority,
    filter_news,
    validate_news_event,
)
from .templates import ALL_TEMPLATES, NewsTemplate, find_disclosure_violations

__all__ = [
    "NewsGenerator",
    "describe_event",
    "fill_slots",
    "sort_news_by_priority",
    "filter_news",
    "validate_news_event",
    "ALL_TEMPLATES",
    "NewsTemplate",
    "find_disclosure_violations",
]
