# WORKFLOW: Pydantic request schemas for API input validation.
# Used by: FastAPI endpoints for request validation and documentation
# Schemas include:
# 1. AnalyzeRequest - Raw packing list text for /packing-list/analyze
#
# Validation flow: HTTP request -> Pydantic validation -> Endpoint processing
# Only the payload shape is checked here; table structure is checked by the parser.

from pydantic import BaseModel, Field, validator

from core.config import settings


class AnalyzeRequest(BaseModel):
    """Request schema for the analyze endpoint."""
    csv_text: str = Field(..., description="Packing list text, header row first")

    @validator('csv_text')
    def validate_size(cls, v):
        if len(v) > settings.max_upload_chars:
            raise ValueError(f'Packing list exceeds {settings.max_upload_chars} characters')
        return v
