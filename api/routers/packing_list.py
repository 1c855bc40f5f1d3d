# WORKFLOW: Packing list endpoints for ingesting tables and reading analytics.
# Used by: Dashboard UI, chart/graph renderers, agent surface
# Endpoints:
# 1. /packing-list/analyze - Parse posted text and replace the current dataset
# 2. /packing-list/sample - Reload the built-in sample packing list
# 3. /packing-list/records - Current record snapshot
# 4. /packing-list/dashboard - KPI cards, recent rows, category and license tables
# 5. /packing-list/stats/{field} - Counts and rankings for any column
#
# Request flow: HTTP request -> Dataset holder / snapshot -> Aggregator -> Pydantic response
# A failed parse returns 400 and leaves the previous dataset in place.

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
import logging

from api.schemas.request import AnalyzeRequest
from api.schemas.response import (
    AnalyzeResponse, DashboardResponse, FieldStatsResponse, RecordsResponse, ValueCount
)
from etl.packing_list_parser import ParseError
from services import aggregator
from services.dashboard import create_dashboard_builder
from services.dataset import packing_list_dataset

logger = logging.getLogger(__name__)

router = APIRouter(tags=["packing-list"])


def _analyze(raw_text: str) -> AnalyzeResponse:
    try:
        records = packing_list_dataset.analyze(raw_text)
    except ParseError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to parse CSV. Please check the format. ({e})",
        )
    except Exception as e:
        logger.error(f"Analyze request failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to analyze packing list: {str(e)}",
        )

    return AnalyzeResponse(
        version=packing_list_dataset.version,
        record_count=len(records),
        headers=list(packing_list_dataset.headers),
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_packing_list(request: AnalyzeRequest):
    """
    Parse a packing list and make it the current dataset.

    The previous dataset is replaced in full on success and kept on failure.
    """
    logger.info(f"Analyze request: {len(request.csv_text)} characters")
    return _analyze(request.csv_text)


@router.post("/sample", response_model=AnalyzeResponse)
async def load_sample_packing_list():
    """Replace the current dataset with the built-in sample packing list."""
    try:
        records = packing_list_dataset.load_sample()
    except ParseError as e:
        logger.error(f"Sample packing list failed to parse: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load sample data: {str(e)}",
        )

    return AnalyzeResponse(
        version=packing_list_dataset.version,
        record_count=len(records),
        headers=list(packing_list_dataset.headers),
    )


@router.get("/records", response_model=RecordsResponse)
async def get_records(limit: Optional[int] = Query(None, ge=0, description="Return only the first N records")):
    """Current record snapshot in source row order."""
    version, records = packing_list_dataset.state()
    rows = records if limit is None else aggregator.top_n(records, limit)

    return RecordsResponse(
        version=version,
        total=aggregator.total_count(records),
        records=[record.to_dict() for record in rows],
    )


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(limit: Optional[int] = Query(None, ge=0, description="Rows per dashboard table")):
    """Dashboard views computed from the current snapshot."""
    version, records = packing_list_dataset.state()

    try:
        return create_dashboard_builder(records, version).build_response(limit)
    except Exception as e:
        logger.error(f"Dashboard build failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build dashboard: {str(e)}",
        )


@router.get("/stats/{field}", response_model=FieldStatsResponse)
async def get_field_stats(field: str, limit: Optional[int] = Query(None, ge=0, description="Truncate rankings to N rows")):
    """
    Distinct count, first-seen breakdown and frequency ranking for one column.

    Unknown columns read as empty strings for every record.
    """
    _, records = packing_list_dataset.state()

    groups = aggregator.group_counts(records, field)
    ranking = aggregator.frequency_ranking(records, field)
    if limit is not None:
        groups = aggregator.top_n(groups, limit)
        ranking = aggregator.top_n(ranking, limit)

    return FieldStatsResponse(
        field=field,
        distinct_count=aggregator.distinct_count(records, field),
        group_counts=[ValueCount(value=value, count=count) for value, count in groups],
        frequency_ranking=[ValueCount(value=value, count=count) for value, count in ranking],
        numeric_total=aggregator.sum_numeric_field(records, field),
    )
