from __future__ import annotations

from enum import Enum
from typing import Tuple


class FieldName(str, Enum):
    LICENCE_NUMBER = "licence_number"
    FULL_NAME = "full_name"
    DATE_OF_BIRTH = "date_of_birth"
    PLACE_OF_BIRTH = "place_of_birth"
    ID_NUMBER = "id_number"
    LICENCE_ISSUE_DATE = "licence_issue_date"
    LICENCE_ISSUE_LOCATION = "licence_issue_location"
    NATIONALITY = "nationality"


# Extraction order; downstream consumers expect exactly these keys.
CANONICAL_FIELDS: Tuple[str, ...] = tuple(e.value for e in FieldName)

DATE_FIELDS = (FieldName.DATE_OF_BIRTH.value, FieldName.LICENCE_ISSUE_DATE.value)
PLACE_FIELDS = (FieldName.PLACE_OF_BIRTH.value, FieldName.LICENCE_ISSUE_LOCATION.value)


def field_key(name) -> str:
    """Plain string key for a FieldName or str."""
    return name.value if isinstance(name, FieldName) else str(name)


def is_canonical_field(name) -> bool:
    return field_key(name) in CANONICAL_FIELDS
