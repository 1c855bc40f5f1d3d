# WORKFLOW: Dashboard builder that assembles analytics views from a record snapshot.
# Used by: Dashboard endpoint, external chart and graph renderers
# Functions:
# 1. build_response() - Build complete DashboardResponse from one snapshot
# 2. _build_summary() - KPI cards (records, customers, devices, units)
# 3. _build_recent_transactions() - First rows of the table
# 4. _build_category_breakdown() - Records per DeviceCategory, first-seen order
# 5. _build_license_table() - Most frequent licenseIDs with their device name
#
# Builder flow: Records snapshot -> Aggregator -> Pydantic models -> Response
# Every view is computed from the same snapshot; records are never modified.

from typing import Optional, Sequence
import logging

from core.config import settings
from etl.records import PackingListItem
from services import aggregator
from api.schemas.response import (
    CategoryCount, DashboardResponse, LicenseRow, SummaryStats
)

logger = logging.getLogger(__name__)


class DashboardBuilder:
    """Builds dashboard views from a packing list snapshot."""

    def __init__(self, records: Sequence[PackingListItem], version: int = 0):
        self.records = records
        self.version = version

    def build_response(self, limit: Optional[int] = None) -> DashboardResponse:
        """
        Build all dashboard views.

        Args:
            limit: Rows per table, defaults to settings.dashboard_top_n

        Returns:
            DashboardResponse for the snapshot
        """
        if limit is None:
            limit = settings.dashboard_top_n

        logger.info(f"Building dashboard for {len(self.records)} records (version {self.version}, limit {limit})")

        return DashboardResponse(
            version=self.version,
            summary=self._build_summary(),
            recent_transactions=self._build_recent_transactions(limit),
            category_breakdown=self._build_category_breakdown(limit),
            license_table=self._build_license_table(limit),
        )

    def _build_summary(self) -> SummaryStats:
        return SummaryStats(
            total_records=aggregator.total_count(self.records),
            unique_customers=aggregator.distinct_count(self.records, "customer"),
            unique_devices=aggregator.distinct_count(self.records, "DeviceName"),
            total_units=aggregator.sum_numeric_field(self.records, "Numbers"),
        )

    def _build_recent_transactions(self, limit: int):
        return [record.to_dict() for record in aggregator.top_n(self.records, limit)]

    def _build_category_breakdown(self, limit: int):
        groups = aggregator.group_counts(self.records, "DeviceCategory")
        return [
            CategoryCount(category=category, count=count)
            for category, count in aggregator.top_n(groups, limit)
        ]

    def _build_license_table(self, limit: int):
        ranking = aggregator.frequency_ranking(self.records, "licenseID")

        rows = []
        for license_id, count in aggregator.top_n(ranking, limit):
            first = aggregator.find_first_by_field(self.records, "licenseID", license_id)
            rows.append(
                LicenseRow(
                    license_id=license_id,
                    count=count,
                    device_name=first.get("DeviceName") if first is not None else "",
                )
            )
        return rows


def create_dashboard_builder(records: Sequence[PackingListItem], version: int = 0) -> DashboardBuilder:
    """Create dashboard builder instance."""
    return DashboardBuilder(records, version)


def build_dashboard(records: Sequence[PackingListItem], limit: Optional[int] = None,
                    version: int = 0) -> DashboardResponse:
    return create_dashboard_builder(records, version).build_response(limit)
