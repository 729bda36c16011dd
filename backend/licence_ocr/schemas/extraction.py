from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ExtractRequest(BaseModel):
    # Left untyped: a non-string transcript yields the invalid-input result, not a 422.
    text: Any = Field(None, description="Raw OCR transcript of the licence")
    min_confidence: Optional[float] = Field(
        None, description="Per-field threshold 0-100; defaults to EXTRACTION_MIN_CONFIDENCE"
    )


class ExtractionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fields: Dict[str, str]
    confidences: Dict[str, int]
    confidence: int
    overall_confidence: int = Field(..., alias="overallConfidence")
    errors: Optional[List[str]] = None
    summary: str
    extracted_fields_count: int = Field(..., alias="extractedFieldsCount")
    processing_timestamp: str = Field(..., alias="processingTimestamp")


class QualityResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    issues: List[str]
    score: int
