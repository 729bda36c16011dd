from .names import (
    ARABIC_FIRST_NAMES,
    ARABIC_LAST_NAMES,
    KNOWN_DOCUMENTS,
    NAME_EXCLUSIONS,
    PLACEHOLDER_NAME,
    KnownDocument,
)
from .places import (
    ARABIC_CITY_NAMES,
    COUNTRIES,
    DEFAULT_NATIONALITY,
    KINGDOM_HEADER_MARKERS,
    MOROCCAN_CITIES,
    NATIONALITY_ALIASES,
)

__all__ = [
    "ARABIC_FIRST_NAMES",
    "ARABIC_LAST_NAMES",
    "KNOWN_DOCUMENTS",
    "NAME_EXCLUSIONS",
    "PLACEHOLDER_NAME",
    "KnownDocument",
    "ARABIC_CITY_NAMES",
    "COUNTRIES",
    "DEFAULT_NATIONALITY",
    "KINGDOM_HEADER_MARKERS",
    "MOROCCAN_CITIES",
    "NATIONALITY_ALIASES",
]
