"""Tests for :mod:`services.aggregator`."""

from __future__ import annotations

import pytest

from etl.records import PackingListItem
from services import aggregator


def _records(field: str, values):
    return [PackingListItem.from_columns({field: value}) for value in values]


def test_end_to_end_scenario(scenario_records) -> None:
    assert aggregator.total_count(scenario_records) == 3
    assert aggregator.distinct_count(scenario_records, "customer") == 2
    assert aggregator.sum_numeric_field(scenario_records, "Numbers") == 22
    assert aggregator.group_counts(scenario_records, "DeviceCategory") == [("Cardio", 2), ("Infusion", 1)]
    assert aggregator.frequency_ranking(scenario_records, "licenseID") == [("LIC1", 2), ("LIC2", 1)]


def test_aggregations_do_not_mutate_records(scenario_records) -> None:
    before = [record.to_dict() for record in scenario_records]

    aggregator.group_counts(scenario_records, "DeviceCategory")
    aggregator.frequency_ranking(scenario_records, "licenseID")
    aggregator.sum_numeric_field(scenario_records, "Numbers")

    assert [record.to_dict() for record in scenario_records] == before


@pytest.mark.parametrize(
    "value, expected",
    [
        ("5", 5),
        ("", 0),
        (None, 0),
        ("abc", 0),
        ("12 boxes", 12),
        ("  7", 7),
        ("-4", -4),
        ("+3", 3),
        ("3.9", 3),
        ("x12", 0),
        ("-", 0),
    ],
)
def test_parse_leading_integer(value, expected) -> None:
    assert aggregator.parse_leading_integer(value) == expected


def test_sum_numeric_field_falls_back_to_zero() -> None:
    records = _records("Numbers", ["5", "", "abc", "3"])

    assert aggregator.sum_numeric_field(records, "Numbers") == 8


def test_sum_numeric_field_empty_sequence() -> None:
    assert aggregator.sum_numeric_field([], "Numbers") == 0


def test_distinct_count_is_case_sensitive_and_counts_empty() -> None:
    records = _records("customer", ["Acme", "acme", "", "Acme", ""])

    assert aggregator.distinct_count(records, "customer") == 3


def test_distinct_values_in_order() -> None:
    records = _records("DeviceCategory", ["Infusion", "Cardio", "Infusion", "Ortho"])

    assert aggregator.distinct_values_in_order(records, "DeviceCategory") == ["Infusion", "Cardio", "Ortho"]


def test_group_counts_keep_first_seen_order() -> None:
    records = _records("DeviceCategory", ["B", "A", "A", "A", "B", "C"])

    assert aggregator.group_counts(records, "DeviceCategory") == [("B", 2), ("A", 3), ("C", 1)]


@pytest.mark.parametrize(
    "values",
    [
        [],
        ["x"],
        ["a", "b", "a", "", "c", ""],
        ["same"] * 5,
    ],
)
def test_group_counts_sum_to_total(values) -> None:
    records = _records("field", values)

    total = sum(count for _, count in aggregator.group_counts(records, "field"))
    assert total == aggregator.total_count(records)


def test_frequency_ranking_is_stable_for_ties() -> None:
    records = _records("licenseID", ["L1", "L2", "L1", "L3", "L2"])

    assert aggregator.frequency_ranking(records, "licenseID") == [("L1", 2), ("L2", 2), ("L3", 1)]


def test_frequency_ranking_sorts_descending() -> None:
    records = _records("licenseID", ["L3", "L1", "L1", "L2", "L1", "L2"])

    assert aggregator.frequency_ranking(records, "licenseID") == [("L1", 3), ("L2", 2), ("L3", 1)]


def test_unknown_field_reads_as_empty(scenario_records) -> None:
    assert aggregator.distinct_count(scenario_records, "NoSuchColumn") == 1
    assert aggregator.group_counts(scenario_records, "NoSuchColumn") == [("", 3)]
    assert aggregator.sum_numeric_field(scenario_records, "NoSuchColumn") == 0
    assert aggregator.find_first_by_field(scenario_records, "NoSuchColumn", "") is scenario_records[0]


def test_empty_sequence_aggregations() -> None:
    assert aggregator.total_count([]) == 0
    assert aggregator.distinct_count([], "customer") == 0
    assert aggregator.distinct_values_in_order([], "customer") == []
    assert aggregator.group_counts([], "customer") == []
    assert aggregator.frequency_ranking([], "customer") == []


def test_top_n_boundaries() -> None:
    seq = [("a", 3), ("b", 2), ("c", 1)]

    assert aggregator.top_n(seq, 3) == seq
    assert aggregator.top_n(seq, 10) == seq
    assert aggregator.top_n(seq, 2) == [("a", 3), ("b", 2)]
    assert aggregator.top_n(seq, 0) == []
    assert aggregator.top_n(seq, -1) == []


def test_top_n_accepts_tuples(scenario_records) -> None:
    assert aggregator.top_n(tuple(scenario_records), 1) == [scenario_records[0]]


def test_find_first_by_field(scenario_records) -> None:
    found = aggregator.find_first_by_field(scenario_records, "licenseID", "LIC1")

    assert found is scenario_records[0]
    assert found.LotNumber == "L100"
    assert aggregator.find_first_by_field(scenario_records, "licenseID", "LIC9") is None
