from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    OK = "OK"
    EMPTY = "EMPTY"
    NO_MATCH = "NO_MATCH"

    # Date
    DATE_EMPTY = "DATE_EMPTY"
    DATE_RANGE = "DATE_RANGE"
    DATE_INVALID = "DATE_INVALID"

    # Document numbers
    LICENCE_EMPTY = "LICENCE_EMPTY"
    LICENCE_PATTERN = "LICENCE_PATTERN"
    ID_EMPTY = "ID_EMPTY"
    ID_PATTERN = "ID_PATTERN"

    # Post-extraction quality
    NAME_MISSING = "NAME_MISSING"
    NAME_PLACEHOLDER = "NAME_PLACEHOLDER"
    DOB_MISSING = "DOB_MISSING"
    LICENCE_MISSING = "LICENCE_MISSING"
    LOW_CONFIDENCE = "LOW_CONFIDENCE"
