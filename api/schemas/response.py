# WORKFLOW: Pydantic response schemas for packing list analytics.
# Used by: API routers, dashboard builder, testing
# Schemas include:
# 1. SummaryStats - KPI cards (records, customers, devices, units)
# 2. CategoryCount / LicenseRow - Breakdown and ranking table rows
# 3. DashboardResponse - Everything the dashboard renders from one snapshot
# 4. AnalyzeResponse / RecordsResponse / FieldStatsResponse - Endpoint payloads
#
# Response flow: Record snapshot -> Aggregator -> Pydantic model -> API response

from pydantic import BaseModel, Field
from typing import Dict, List


class SummaryStats(BaseModel):
    total_records: int = Field(..., ge=0)
    unique_customers: int = Field(..., ge=0)
    unique_devices: int = Field(..., ge=0)
    total_units: int


class ValueCount(BaseModel):
    value: str
    count: int = Field(..., ge=0)


class CategoryCount(BaseModel):
    category: str
    count: int = Field(..., ge=0)


class LicenseRow(BaseModel):
    license_id: str
    count: int = Field(..., ge=0)
    device_name: str = Field("", description="DeviceName of the first record with this license")


class DashboardResponse(BaseModel):
    """Dashboard views derived from a single record snapshot."""
    version: int = Field(..., ge=0, description="Dataset version the views were built from")
    summary: SummaryStats
    recent_transactions: List[Dict[str, str]] = Field(default_factory=list)
    category_breakdown: List[CategoryCount] = Field(default_factory=list)
    license_table: List[LicenseRow] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    status: str = "parsed"
    version: int = Field(..., ge=0)
    record_count: int = Field(..., ge=0)
    headers: List[str] = Field(default_factory=list)


class RecordsResponse(BaseModel):
    version: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    records: List[Dict[str, str]] = Field(default_factory=list)


class FieldStatsResponse(BaseModel):
    field: str
    distinct_count: int = Field(..., ge=0)
    group_counts: List[ValueCount] = Field(default_factory=list)
    frequency_ranking: List[ValueCount] = Field(default_factory=list)
    numeric_total: int
