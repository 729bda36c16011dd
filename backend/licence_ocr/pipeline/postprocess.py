from __future__ import annotations

import re
from typing import Any, Dict

from licence_ocr.constants import ARABIC_CITY_NAMES, NATIONALITY_ALIASES
from licence_ocr.ocr.labels import DATE_FIELDS, PLACE_FIELDS, FieldName, field_key, is_canonical_field
from licence_ocr.ocr.text_utils import normalize_arabic_letters, to_title_case
from licence_ocr.parsers import parse_date
from licence_ocr.validations.error_codes import ErrorCode


def _ok(norm: str) -> Dict[str, Any]:
    return {"norm": norm, "parse_ok": True, "parse_err": None}


def _fail(code: ErrorCode) -> Dict[str, Any]:
    return {"norm": None, "parse_ok": False, "parse_err": code.value}


def parse_and_normalize(field: str, text: str) -> Dict[str, Any]:
    """Normalize an extracted value for a known field.

    Returns a dict with: { norm: Optional[str], parse_ok: bool, parse_err: Optional[str] }
    - For dates: norm = DD/MM/YYYY
    - For places: norm = title case, Arabic city names rendered in Latin
    - For licence/ID numbers: norm = upper case (ID also without spaces/dots)
    - For nationality: norm = canonical nationality, else title case
    - For full_name: norm = title case
    """
    if not text or not isinstance(text, str) or not text.strip():
        return _fail(ErrorCode.EMPTY)
    if not is_canonical_field(field):
        return {"norm": None, "parse_ok": False, "parse_err": None}
    key = field_key(field)
    value = re.sub(r"\s+", " ", text).strip()

    if key in DATE_FIELDS:
        r = parse_date(value)
        if r.date:
            return _ok(r.date)
        return _fail(ErrorCode.DATE_INVALID)

    if key in PLACE_FIELDS:
        latin = ARABIC_CITY_NAMES.get(normalize_arabic_letters(value), value)
        return _ok(to_title_case(latin))

    if key == FieldName.ID_NUMBER.value:
        return _ok(re.sub(r"[\s.]+", "", value).upper())

    if key == FieldName.LICENCE_NUMBER.value:
        return _ok(value.replace(" ", "").upper())

    if key == FieldName.NATIONALITY.value:
        alias = NATIONALITY_ALIASES.get(value.upper()) or NATIONALITY_ALIASES.get(value)
        return _ok(alias or to_title_case(value))

    # full_name
    return _ok(to_title_case(value))
