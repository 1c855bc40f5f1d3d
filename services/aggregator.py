# WORKFLOW: Read-only aggregations over a packing list record sequence.
# Used by: Dashboard builder, API stats endpoints, external renderers
# Functions:
# 1. total_count() / distinct_count() - Scalar counts
# 2. parse_leading_integer() / sum_numeric_field() - Lenient quantity totals
# 3. distinct_values_in_order() / group_counts() - First-seen breakdowns
# 4. frequency_ranking() - Values ranked by count, ties in first-seen order
# 5. top_n() / find_first_by_field() - Table helpers
#
# Aggregation flow: Records -> Column series -> Counts / totals -> Plain Python values
# Unknown fields read as empty strings, so every function is total.

"""
Read-only aggregations over a packing list record sequence.
"""

import logging
import re
from typing import Any, List, Optional, Sequence, Tuple

import pandas as pd

from etl.records import PackingListItem

logger = logging.getLogger(__name__)

LEADING_INTEGER_RE = re.compile(r'^\s*([+-]?[0-9]+)')


def _column(records: Sequence[PackingListItem], field: str) -> pd.Series:
    """String series of ``field`` across records, '' where a record lacks it."""
    return pd.Series([record.get(field) for record in records], dtype=object)


def total_count(records: Sequence[PackingListItem]) -> int:
    return len(records)


def distinct_count(records: Sequence[PackingListItem], field: str) -> int:
    """Number of unique literal values of ``field``, empty string included."""
    return int(_column(records, field).nunique(dropna=False))


def parse_leading_integer(value: Optional[str]) -> int:
    """
    Parse the longest leading integer of a string.

    Leading whitespace and a single sign are accepted, parsing stops at the
    first non-digit ("12 boxes" -> 12, "3.9" -> 3). Text without a leading
    integer yields 0 instead of raising.

    Args:
        value: Raw quantity text

    Returns:
        Parsed integer, or 0 when there is no valid prefix
    """
    if not value:
        return 0

    match = LEADING_INTEGER_RE.match(value)
    if not match:
        return 0

    return int(match.group(1))


def sum_numeric_field(records: Sequence[PackingListItem], field: str) -> int:
    """Sum of ``field`` across records with non-numeric values counted as 0."""
    if not records:
        return 0
    return int(_column(records, field).map(parse_leading_integer).sum())


def distinct_values_in_order(records: Sequence[PackingListItem], field: str) -> List[str]:
    # Series.unique keeps order of appearance
    return list(_column(records, field).unique())


def group_counts(records: Sequence[PackingListItem], field: str) -> List[Tuple[str, int]]:
    """
    Count records per distinct value of ``field``.

    Returns:
        (value, count) pairs in first-seen order of the values
    """
    if not records:
        return []

    column = _column(records, field)
    counts = column.groupby(column, sort=False).size()
    return [(value, int(count)) for value, count in counts.items()]


def frequency_ranking(records: Sequence[PackingListItem], field: str) -> List[Tuple[str, int]]:
    """
    Rank distinct values of ``field`` by occurrence count, highest first.

    Values with equal counts keep their first-seen order.

    Returns:
        (value, count) pairs sorted by descending count
    """
    return sorted(group_counts(records, field), key=lambda item: item[1], reverse=True)


def top_n(sequence: Sequence[Any], n: int) -> List[Any]:
    """First ``n`` elements of ``sequence``; empty when ``n`` is 0 or negative."""
    if n <= 0:
        return []
    return list(sequence[:n])


def find_first_by_field(
    records: Sequence[PackingListItem], field: str, value: str
) -> Optional[PackingListItem]:
    """
    Find the first record whose ``field`` equals ``value``.

    Returns:
        The matching record, or None when no record matches
    """
    for record in records:
        if record.get(field) == value:
            return record

    logger.debug(f"No record with {field}={value!r}")
    return None
