from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from licence_ocr.constants import PLACEHOLDER_NAME
from licence_ocr.ocr.labels import FieldName

from .error_codes import ErrorCode

# Quality gate: an extraction below this overall confidence needs review.
QUALITY_MIN_CONFIDENCE = 70

LICENCE_NUMBER_RX = re.compile(r"^(?:\d{2}/\d{6}|[A-Z]?\d{6,15}|\d{2}[/\-]\d{4,10})$")
ID_NUMBER_RX = re.compile(r"^[A-Z]{1,2}\d{6,8}$")


@dataclass
class ValidationResult:
    ok: bool
    code: ErrorCode
    meta: Dict[str, Any]


@dataclass
class QualityReport:
    is_valid: bool
    issues: List[str] = field(default_factory=list)
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "issues": list(self.issues), "score": self.score}


def _parse_date_input(value: Union[str, Tuple[int, int, int]]) -> Optional[Tuple[int, int, int]]:
    if isinstance(value, tuple) and len(value) == 3:
        d, m, y = value
        return int(d), int(m), int(y)
    if isinstance(value, str):
        # Expect DD/MM/YYYY
        m = re.match(r"^(\d{2})/(\d{2})/(\d{4})$", value.strip())
        if not m:
            return None
        return int(m.group(1)), int(m.group(2)), int(m.group(3))
    return None


def validate_date(
    value: Union[str, Tuple[int, int, int], None], *, min_year: int = 1900, max_year: int = 2100
) -> ValidationResult:
    if value in (None, ""):
        return ValidationResult(False, ErrorCode.DATE_EMPTY, {"value": value})
    parsed = _parse_date_input(value)
    if not parsed:
        return ValidationResult(False, ErrorCode.DATE_INVALID, {"value": value})
    d, m, y = parsed
    if not (min_year <= y <= max_year):
        return ValidationResult(False, ErrorCode.DATE_RANGE, {"y": y, "min": min_year, "max": max_year})
    try:
        date(y, m, d)
    except ValueError as e:
        return ValidationResult(False, ErrorCode.DATE_INVALID, {"error": str(e), "d": d, "m": m, "y": y})
    return ValidationResult(True, ErrorCode.OK, {"d": d, "m": m, "y": y})


def validate_licence_number(value: Optional[str]) -> ValidationResult:
    if value in (None, ""):
        return ValidationResult(False, ErrorCode.LICENCE_EMPTY, {})
    s = str(value).strip().upper()
    if not LICENCE_NUMBER_RX.match(s):
        return ValidationResult(False, ErrorCode.LICENCE_PATTERN, {"value": s})
    return ValidationResult(True, ErrorCode.OK, {"value": s})


def validate_id_number(value: Optional[str]) -> ValidationResult:
    if value in (None, ""):
        return ValidationResult(False, ErrorCode.ID_EMPTY, {})
    s = re.sub(r"[\s.]+", "", str(value)).upper()
    if not ID_NUMBER_RX.match(s):
        return ValidationResult(False, ErrorCode.ID_PATTERN, {"value": s})
    return ValidationResult(True, ErrorCode.OK, {"value": s})


def _read(result: Any, attr: str, key: str, default: Any) -> Any:
    if isinstance(result, Mapping):
        return result.get(key, default)
    return getattr(result, attr, default)


def validate_extracted_data(result: Any) -> QualityReport:
    """Post-extraction quality check.

    Accepts an ``ExtractionResult`` or its ``to_dict()`` form. Issues are
    ``ErrorCode`` values; ``score`` is the overall confidence.
    """
    fields = _read(result, "fields", "fields", None) or {}
    score = _read(result, "overall_confidence", "overallConfidence", 0) or 0
    try:
        score = int(score)
    except (TypeError, ValueError):
        score = 0

    issues: List[str] = []
    name = (fields.get(FieldName.FULL_NAME.value) or "").strip()
    if not name:
        issues.append(ErrorCode.NAME_MISSING.value)
    elif name == PLACEHOLDER_NAME:
        issues.append(ErrorCode.NAME_PLACEHOLDER.value)
    if not (fields.get(FieldName.DATE_OF_BIRTH.value) or "").strip():
        issues.append(ErrorCode.DOB_MISSING.value)
    if not (fields.get(FieldName.LICENCE_NUMBER.value) or "").strip():
        issues.append(ErrorCode.LICENCE_MISSING.value)
    if score < QUALITY_MIN_CONFIDENCE:
        issues.append(ErrorCode.LOW_CONFIDENCE.value)
    return QualityReport(is_valid=not issues, issues=issues, score=score)
