"""Shared fixtures for the packing list test suite."""

from __future__ import annotations

import csv

import pytest

from etl.packing_list_parser import parse


SCENARIO_CSV = (
    "customer,DeviceName,DeviceCategory,LotNumber,deliverdate,licenseID,Numbers\n"
    "Acme,Stent,Cardio,L100,2024-01-01,LIC1,10\n"
    "Acme,Stent,Cardio,L101,2024-01-02,LIC1,5\n"
    "Beta,Pump,Infusion,L200,2024-01-03,LIC2,7"
)


@pytest.fixture
def scenario_csv() -> str:
    """Three-row packing list used by the end-to-end checks."""
    return SCENARIO_CSV


@pytest.fixture
def scenario_records(scenario_csv):
    return parse(scenario_csv)


@pytest.fixture
def small_csv_field_limit():
    """Lower the csv field size limit to 16 characters for one test."""
    previous = csv.field_size_limit(16)
    yield 16
    csv.field_size_limit(previous)
