"""Thousand-separator grouping of the integer part of a number."""
from __future__ import annotations

import re

from currency_format.models.options import GroupingScheme

# A digit followed by a whole number of groups up to the end of the run.
GROUPING_PATTERNS: dict[GroupingScheme, re.Pattern[str]] = {
    GroupingScheme.PLAIN3: re.compile(r"(\d)(?=(\d{3})+(?!\d))"),
    GroupingScheme.GROUP2: re.compile(r"(\d)(?=(\d{2})+(?!\d))"),
    # Lakh/crore: the last group has 3 digits, the rest have 2.
    GroupingScheme.GROUP2_SCALED: re.compile(r"(\d)(?=(((\d{2})+)(\d{1})(?!\d)))"),
    GroupingScheme.GROUP4: re.compile(r"(\d)(?=(\d{4})+(?!\d))"),
}


def format_thousand(
    before_decimal: str,
    separator: str,
    grouping: GroupingScheme = GroupingScheme.PLAIN3,
) -> str:
    """Insert *separator* into *before_decimal* according to *grouping*.

    >>> format_thousand("1234567", ",")
    '1,234,567'
    >>> format_thousand("1234567", ",", GroupingScheme.GROUP2_SCALED)
    '12,34,567'
    """
    pattern = GROUPING_PATTERNS.get(grouping, GROUPING_PATTERNS[GroupingScheme.PLAIN3])
    return pattern.sub(lambda match: match.group(1) + separator, before_decimal)
