from __future__ import annotations

import math
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple

from licence_ocr.config import DEFAULT_EXTRACTION
from licence_ocr.constants import ARABIC_CITY_NAMES, COUNTRIES, MOROCCAN_CITIES, NATIONALITY_ALIASES
from licence_ocr.ocr.labels import FieldName, field_key
from licence_ocr.ocr.text_utils import normalize_arabic_letters

MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100

# Pattern extraction
BASE_CONFIDENCE = 60
LABEL_BOOST = 10
LICENCE_SHAPE_BOOST = 30
LICENCE_DIGITS_BOOST = 20
STRICT_DATE_BOOST = 20
PLAUSIBLE_YEAR_BOOST = 10
ID_SHAPE_BOOST = 20
PLACE_COUNTRY_BOOST = 30
KNOWN_CITY_BOOST = 20
NATIONALITY_KEYWORD_BOOST = 20

BIRTH_YEAR_RANGE = (1940, 2010)
ISSUE_YEAR_RANGE = (1990, 2030)

# Semantic-parser fallbacks score below the pattern table
SEMANTIC_FALLBACK_PENALTY = 20

# Nationality default when no pattern matched
NATIONALITY_HEADER_CONFIDENCE = 95
NATIONALITY_DEFAULT_CONFIDENCE = 80

# Name recovery
LABEL_NAME_SCORE = 75
UPPERCASE_BASE_SCORE = 50
ALONE_ON_LINE_BOOST = 10
ALPHABETIC_BOOST = 15
TOP_QUARTER_BOOST = 5
TRANSLITERATION_SCORE = 80
FINGERPRINT_SCORE = 100
GENERIC_PAIR_SCORE = 70
PLACEHOLDER_CONFIDENCE = 70
SINGLE_HALF_FLOOR = 75
BOTH_LABELLED_CONFIDENCE = 100
BOTH_UPPERCASE_CONFIDENCE = 90
TRANSLITERATED_CONFIDENCE = 85
MIXED_SOURCES_CONFIDENCE = 80


@dataclass(frozen=True)
class BoostRule:
    name: str
    test: Callable[[str], bool]
    boost: int


def _matches(pattern: str, flags: int = 0) -> Callable[[str], bool]:
    rx = re.compile(pattern, flags)
    return lambda v: bool(rx.match(v))


def _year_in(bounds: Tuple[int, int]) -> Callable[[str], bool]:
    lo, hi = bounds

    def test(value: str) -> bool:
        tail = re.split(r"[/\-.]", value)[-1]
        return tail.isdigit() and lo <= int(tail) <= hi

    return test


def _known_city(value: str) -> bool:
    v = re.sub(r"\s+", " ", value).strip().upper()
    return v in MOROCCAN_CITIES or normalize_arabic_letters(value.strip()) in ARABIC_CITY_NAMES


def _ends_with_country(value: str) -> bool:
    v = re.sub(r"\s+", " ", value).strip().upper()
    return any(v.endswith(" " + c) for c in COUNTRIES)


def _known_nationality(value: str) -> bool:
    return value.strip().upper() in NATIONALITY_ALIASES or value.strip() in NATIONALITY_ALIASES


_STRICT_DATE = _matches(r"^\d{2}/\d{2}/\d{4}$")

BOOST_RULES: Mapping[str, Tuple[BoostRule, ...]] = MappingProxyType(
    {
        FieldName.LICENCE_NUMBER.value: (
            BoostRule("licence_shape", _matches(r"^\d{2}/\d{6}$"), LICENCE_SHAPE_BOOST),
            BoostRule("licence_digits", _matches(r"^\d{8,}$"), LICENCE_DIGITS_BOOST),
        ),
        FieldName.DATE_OF_BIRTH.value: (
            BoostRule("strict_date", _STRICT_DATE, STRICT_DATE_BOOST),
            BoostRule("plausible_birth_year", _year_in(BIRTH_YEAR_RANGE), PLAUSIBLE_YEAR_BOOST),
        ),
        FieldName.LICENCE_ISSUE_DATE.value: (
            BoostRule("strict_date", _STRICT_DATE, STRICT_DATE_BOOST),
            BoostRule("plausible_issue_year", _year_in(ISSUE_YEAR_RANGE), PLAUSIBLE_YEAR_BOOST),
        ),
        FieldName.PLACE_OF_BIRTH.value: (
            BoostRule("country_suffix", _ends_with_country, PLACE_COUNTRY_BOOST),
            BoostRule("known_city", _known_city, KNOWN_CITY_BOOST),
        ),
        FieldName.ID_NUMBER.value: (
            BoostRule("cnie_shape", _matches(r"^[A-Z]{1,2}\d{6,8}$"), ID_SHAPE_BOOST),
        ),
        FieldName.LICENCE_ISSUE_LOCATION.value: (
            BoostRule("known_city", _known_city, KNOWN_CITY_BOOST),
        ),
        FieldName.NATIONALITY.value: (
            BoostRule("nationality_keyword", _known_nationality, NATIONALITY_KEYWORD_BOOST),
        ),
    }
)


def clamp_confidence(x: float) -> int:
    return int(max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, x)))


def score_candidate(field: str, value: str, *, labelled: bool = False) -> int:
    """Score a pattern hit: base, label boost, then every matching rule."""
    score = BASE_CONFIDENCE
    if labelled:
        score += LABEL_BOOST
    for rule in BOOST_RULES.get(field_key(field), ()):
        if rule.test(value):
            score += rule.boost
    return clamp_confidence(score)


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def overall_confidence(values: Iterable[float]) -> int:
    """Mean of the strictly positive confidences; 0 when there are none."""
    positives = [float(v) for v in values if v and v > 0]
    if not positives:
        return 0
    return clamp_confidence(round_half_up(sum(positives) / len(positives)))


def passes_threshold(confidence: float, *, threshold: Optional[float] = None) -> bool:
    thr = threshold if threshold is not None else DEFAULT_EXTRACTION.min_confidence
    return clamp_confidence(confidence) >= float(thr)
