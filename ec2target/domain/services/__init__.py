"""
Domain Services Package

Architectural Intent:
- Contains pure domain logic with no AWS SDK dependency
"""

from ec2target.domain.services.filter_builder import (
    RUNNING_STATE_FILTER,
    build_filters,
    parse_tag_pairs,
)

__all__ = [
    "RUNNING_STATE_FILTER",
    "build_filters",
    "parse_tag_pairs",
]
