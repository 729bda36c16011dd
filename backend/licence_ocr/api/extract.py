from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from licence_ocr.config import DEFAULT_API
from licence_ocr.schemas.extraction import ExtractionResponse, ExtractRequest, QualityResponse
from licence_ocr.services.extraction import extract_fields_from_ocr, process_ocr_results
from licence_ocr.validations.gates import validate_extracted_data

router = APIRouter(prefix="/extract", tags=["extract"])
logger = logging.getLogger(__name__)


def _check_size(payload: ExtractRequest) -> None:
    text = payload.text
    if isinstance(text, str) and len(text) > DEFAULT_API.max_text_chars:
        logger.warning("extract_payload_too_large", extra={"chars": len(text), "limit": DEFAULT_API.max_text_chars})
        raise HTTPException(status_code=413, detail="text_too_large")


@router.post("", response_model=ExtractionResponse)
def extract(payload: ExtractRequest) -> Dict[str, Any]:
    """Run the full extraction and return the ExtractionResult keys."""
    _check_size(payload)
    return extract_fields_from_ocr(payload.text, payload.min_confidence).to_dict()


@router.post("/customer")
def extract_customer(payload: ExtractRequest) -> Dict[str, Any]:
    """Extraction shaped for customer-record creation (0-1 confidences)."""
    _check_size(payload)
    return process_ocr_results(payload.text, payload.min_confidence)


@router.post("/quality", response_model=QualityResponse)
def extract_quality(payload: ExtractRequest) -> Dict[str, Any]:
    _check_size(payload)
    result = extract_fields_from_ocr(payload.text, payload.min_confidence)
    return validate_extracted_data(result).to_dict()
