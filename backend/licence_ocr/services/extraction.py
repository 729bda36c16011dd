from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from licence_ocr.config import DEFAULT_EXTRACTION
from licence_ocr.constants import DEFAULT_NATIONALITY, KINGDOM_HEADER_MARKERS, PLACEHOLDER_NAME
from licence_ocr.ocr.labels import CANONICAL_FIELDS, DATE_FIELDS, FieldName
from licence_ocr.ocr.text_utils import preprocess_text
from licence_ocr.parsers import parse_name, parse_place
from licence_ocr.pipeline.postprocess import parse_and_normalize
from licence_ocr.validations.confidence import (
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    NATIONALITY_DEFAULT_CONFIDENCE,
    NATIONALITY_HEADER_CONFIDENCE,
    SEMANTIC_FALLBACK_PENALTY,
    clamp_confidence,
    overall_confidence,
    passes_threshold,
    round_half_up,
)
from licence_ocr.validations.gates import validate_date
from licence_ocr.validations.patterns import FIELD_PATTERNS

from .fields import FieldCandidate, extract_field_value
from .names import SOURCE_PLACEHOLDER, recover_full_name

logger = logging.getLogger(__name__)

INVALID_INPUT_ERROR = "Invalid OCR text"
FAILED_SUMMARY = "❌ OCR extraction failed"


@dataclass
class ExtractionResult:
    fields: Dict[str, str]
    confidences: Dict[str, int]
    overall_confidence: int = 0
    errors: Optional[List[str]] = None
    summary: str = ""
    extracted_fields_count: int = 0
    processing_timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fields": dict(self.fields),
            "confidences": dict(self.confidences),
            "confidence": self.overall_confidence,
            "overallConfidence": self.overall_confidence,
            "errors": list(self.errors) if self.errors else None,
            "summary": self.summary,
            "extractedFieldsCount": self.extracted_fields_count,
            "processingTimestamp": self.processing_timestamp,
        }


def _coerce_threshold(min_confidence: Any) -> float:
    if min_confidence is None:
        return float(DEFAULT_EXTRACTION.min_confidence)
    try:
        thr = float(min_confidence)
    except (TypeError, ValueError):
        return float(DEFAULT_EXTRACTION.min_confidence)
    if math.isnan(thr):
        return float(DEFAULT_EXTRACTION.min_confidence)
    return max(float(MIN_CONFIDENCE), min(float(MAX_CONFIDENCE), thr))


def _invalid_result() -> ExtractionResult:
    return ExtractionResult(
        fields={f: "" for f in CANONICAL_FIELDS},
        confidences={f: 0 for f in CANONICAL_FIELDS},
        overall_confidence=0,
        errors=[INVALID_INPUT_ERROR],
        summary=FAILED_SUMMARY,
        extracted_fields_count=0,
    )


def _place_from_birth_line(cleaned: str, birth_raw: Optional[str]) -> Optional[FieldCandidate]:
    if not birth_raw:
        return None
    for line in cleaned.split("\n"):
        if birth_raw not in line:
            continue
        parsed = parse_place(line)
        if parsed.place:
            conf = round_half_up(parsed.confidence * 100) - SEMANTIC_FALLBACK_PENALTY
            return FieldCandidate(parsed.place, clamp_confidence(conf), "parser:place")
        return None
    return None


def _default_nationality(raw: str, cleaned: str) -> FieldCandidate:
    haystacks = (raw.upper(), cleaned.upper())
    if any(marker in h for marker in KINGDOM_HEADER_MARKERS for h in haystacks):
        return FieldCandidate(DEFAULT_NATIONALITY, NATIONALITY_HEADER_CONFIDENCE, "default:header")
    return FieldCandidate(DEFAULT_NATIONALITY, NATIONALITY_DEFAULT_CONFIDENCE, "default")


def extract_fields_from_ocr(ocr_text: Any, min_confidence: Any = None) -> ExtractionResult:
    """Extract the eight licence fields from one OCR transcript.

    Values below ``min_confidence`` are kept with their score and flagged in
    ``errors``; missing fields are empty with confidence 0. Nationality falls
    back to the Moroccan default and the name to a placeholder, so neither is
    ever empty for a string input. Never raises.
    """
    if not isinstance(ocr_text, str):
        logger.warning("extraction_invalid_input", extra={"input_type": type(ocr_text).__name__})
        return _invalid_result()

    threshold = _coerce_threshold(min_confidence)
    cleaned = preprocess_text(ocr_text)
    logger.info("extraction_start", extra={"chars": len(ocr_text), "lines": cleaned.count("\n") + 1 if cleaned else 0})
    logger.debug("extraction_text_cleaned", extra={"chars": len(cleaned)})

    fields: Dict[str, str] = {}
    confidences: Dict[str, int] = {}
    errors: List[str] = []
    raw_hits: Dict[str, str] = {}

    for name in CANONICAL_FIELDS:
        if name == FieldName.FULL_NAME.value:
            candidate: Optional[FieldCandidate] = recover_full_name(cleaned)
        else:
            candidate = extract_field_value(cleaned, FIELD_PATTERNS[name], name)
            if candidate is None and name == FieldName.PLACE_OF_BIRTH.value:
                candidate = _place_from_birth_line(cleaned, raw_hits.get(FieldName.DATE_OF_BIRTH.value))
            if candidate is None and name == FieldName.NATIONALITY.value:
                candidate = _default_nationality(ocr_text, cleaned)

        if candidate is None:
            fields[name] = ""
            confidences[name] = 0
            errors.append(f"Field {name} not found")
            logger.debug("field_missing", extra={"field": name})
            continue

        raw_hits[name] = candidate.value
        normalized = parse_and_normalize(name, candidate.value)
        value = normalized["norm"] if normalized["parse_ok"] else candidate.value
        conf = clamp_confidence(candidate.confidence)
        fields[name] = value
        confidences[name] = conf

        if candidate.source == SOURCE_PLACEHOLDER:
            errors.append(f"Field {name} not found")
        elif not passes_threshold(conf, threshold=threshold):
            errors.append(f"Low confidence for {name}: {conf}%")
        if name in DATE_FIELDS:
            check = validate_date(value)
            if not check.ok:
                errors.append(f"Invalid date for {name}: {value}")
        logger.debug("field_extracted", extra={"field": name, "source": candidate.source, "confidence": conf})

    passing = sum(1 for c in confidences.values() if passes_threshold(c, threshold=threshold))
    result = ExtractionResult(
        fields=fields,
        confidences=confidences,
        overall_confidence=overall_confidence(confidences.values()),
        errors=errors or None,
        summary=f"✅ {passing} fields extracted successfully",
        extracted_fields_count=sum(1 for v in fields.values() if v),
    )
    logger.info(
        "extraction_complete",
        extra={
            "overall_confidence": result.overall_confidence,
            "extracted": result.extracted_fields_count,
            "errors": len(errors),
            "placeholder_name": fields.get(FieldName.FULL_NAME.value) == PLACEHOLDER_NAME,
        },
    )
    return result


_ARABIC_TEMPLATE_WORDS = ("رخصة", "السياقة", "تاريخ", "مكان", "رقم", "الجنسية", "سلمت")


def _arabic_name_rendition(ocr_text: Any) -> str:
    if not isinstance(ocr_text, str):
        return ""
    lines = [
        line
        for line in preprocess_text(ocr_text).split("\n")
        if not any(m in line for m in KINGDOM_HEADER_MARKERS)
        and not any(w in line for w in _ARABIC_TEMPLATE_WORDS)
    ]
    return parse_name("\n".join(lines)).arabic


def process_ocr_results(ocr_text: Any, min_confidence: Any = None) -> Dict[str, Any]:
    """Shape an extraction for the customer-record flow.

    Each field becomes ``{value, confidence}`` with the confidence on a 0-1
    scale; raw values are repeated at the top level and ``raw_name`` carries
    the Arabic rendition of the holder's name when the card prints one.
    """
    result = extract_fields_from_ocr(ocr_text, min_confidence)
    shaped: Dict[str, Any] = {
        "fields": {
            name: {"value": result.fields[name], "confidence": result.confidences[name] / 100.0}
            for name in CANONICAL_FIELDS
        },
        "confidence": result.overall_confidence,
        "errors": list(result.errors) if result.errors else None,
        "summary": result.summary,
    }
    for name in CANONICAL_FIELDS:
        shaped[name] = result.fields[name]
    shaped["raw_name"] = _arabic_name_rendition(ocr_text)
    return shaped
