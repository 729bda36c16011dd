"""OCR text package.

Exports script classification, token filtering and transcript cleanup helpers.
"""

from .labels import FieldName, CANONICAL_FIELDS
from .script import (
    ScriptType,
    detect_script,
    filter_tokens_by_script,
    extract_latin_text,
    extract_arabic_text,
    extract_numeric_tokens,
)
from .text_utils import preprocess_text, clean_ocr_text, to_title_case

__all__ = [
    "FieldName",
    "CANONICAL_FIELDS",
    "ScriptType",
    "detect_script",
    "filter_tokens_by_script",
    "extract_latin_text",
    "extract_arabic_text",
    "extract_numeric_tokens",
    "preprocess_text",
    "clean_ocr_text",
    "to_title_case",
]
