from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Match, Optional, Pattern, Tuple

from licence_ocr.constants import ARABIC_CITY_NAMES, COUNTRIES, MOROCCAN_CITIES
from licence_ocr.ocr.labels import FieldName


@dataclass(frozen=True)
class FieldPattern:
    """One extraction pattern of a field.

    ``labelled`` marks patterns anchored on a printed label; their hits earn
    the label boost. Group 1 is the value when the pattern has a group.
    ``last`` keeps the final match instead of the first, and only when the
    regex matched more than once.
    """

    name: str
    regex: Pattern[str]
    labelled: bool = False
    last: bool = False

    def find(self, text: str) -> Optional[Match[str]]:
        if not self.last:
            return self.regex.search(text)
        found, count = None, 0
        for found in self.regex.finditer(text):
            count += 1
        return found if count > 1 else None


_DATE = r"\d{1,2}[/\-.]\d{1,2}[/\-.]\d{4}"
_ARABIC_LETTER = "\u0600-\u06FF"
# Up to four upper-case words; the first needs three letters so that
# particles like "DU" cannot open a place name.
_PLACE_VALUE = r"([A-Z]{3,}(?: [A-Z]{2,}){0,3})\b"
# Printed field labels; a label with an empty value must not capture the next one.
_NOT_LABEL = (
    r"(?!(?i:date|lieu|nom|pr[ée]noms?|nationalit[ée]|naissance|cnie|cat[ée]gories?|valable|validit[ée]"
    r"|signature|titulaire|adresse|permis|d[ée]livr[ée]e?)\b)"
)


def _latin_alternation(words: Iterable[str]) -> str:
    ordered = sorted(words, key=len, reverse=True)
    return "|".join(r"\s+".join(re.escape(p) for p in w.split()) for w in ordered)


def _arabic_alternation(words: Iterable[str]) -> str:
    # Table keys are alef-normalised; accept every alef form in the text.
    def one(word: str) -> str:
        out = []
        for ch in word:
            if ch == "ا":
                out.append("[اأإآ]")
            elif ch.isspace():
                out.append(r"\s+")
            else:
                out.append(re.escape(ch))
        return "".join(out)

    ordered = sorted(words, key=len, reverse=True)
    return "|".join(one(w) for w in ordered)


_CITY_RX = re.compile(r"\b(" + _latin_alternation(MOROCCAN_CITIES) + r")\b", re.IGNORECASE)
_ARABIC_CITY_RX = re.compile(
    "(?<![" + _ARABIC_LETTER + "])(" + _arabic_alternation(ARABIC_CITY_NAMES.keys()) + ")(?![" + _ARABIC_LETTER + "])"
)


_LICENCE_NUMBER: Tuple[FieldPattern, ...] = (
    FieldPattern(
        "licence_label",
        re.compile(r"(?i:permis\s*(?:de\s*conduire\s*)?(?:n[°º]?|no)|رقم\s*الرخصة)\s*[.:]?\s*([A-Z]?\d[\d/\-]{4,13}\d)"),
        labelled=True,
    ),
    FieldPattern("licence_shape", re.compile(r"\b(\d{2}/\d{6})\b")),
    FieldPattern("licence_digits", re.compile(r"\b(\d{8,})\b")),
)

_DATE_OF_BIRTH: Tuple[FieldPattern, ...] = (
    FieldPattern(
        "birth_date_label",
        re.compile(
            r"(?i:date\s*(?:et\s*lieu\s*)?de\s*naissance|تاريخ\s*(?:و\s*مكان\s*)?الازدياد|تاريخ\s*الولادة)"
            r"\D{0,80}?(" + _DATE + r")"
        ),
        labelled=True,
    ),
    FieldPattern("first_date", re.compile(r"\b(\d{2}/\d{2}/\d{4})\b")),
    FieldPattern("loose_date", re.compile(r"\b(" + _DATE + r")\b")),
)

_PLACE_OF_BIRTH: Tuple[FieldPattern, ...] = (
    FieldPattern(
        "birth_place_after_date",
        re.compile(r"(?i:lieu\s*de\s*naissance|مكان\s*الازدياد)\D{0,80}?" + _DATE + r"[^A-Z\n]{0,40}?" + _PLACE_VALUE),
        labelled=True,
    ),
    FieldPattern(
        "birth_place_label",
        re.compile(r"(?i:lieu\s*de\s*naissance|مكان\s*الازدياد)[^A-Z\n]{0,40}?" + _PLACE_VALUE),
        labelled=True,
    ),
    FieldPattern(
        "place_with_country",
        re.compile(
            r"\b(?!ROYAUME\b|KINGDOM\b)([A-Z]{3,}(?: [A-Z]{2,}){0,2} (?:" + _latin_alternation(COUNTRIES) + r"))\b"
        ),
    ),
    FieldPattern("known_city", _CITY_RX),
)

_ID_NUMBER: Tuple[FieldPattern, ...] = (
    FieldPattern(
        "cnie_label",
        re.compile(
            r"(?i:\b(?:n[°º]?\s*)?c\.?\s*n\.?\s*i\.?\s*e\b\.?|رقم\s*البطاقة\s*الوطنية)\s*[/.]?\s*([A-Z]{1,2}\d{6,8})\b"
        ),
        labelled=True,
    ),
    FieldPattern("cnie_shape", re.compile(r"\b([A-Z]{1,2}\d{6,8})\b")),
    FieldPattern("cnie_dotted", re.compile(r"\b(C\.?\s?T\.?\s?\d{6,8})\b")),
)

_LICENCE_ISSUE_DATE: Tuple[FieldPattern, ...] = (
    FieldPattern(
        "issue_date_label",
        re.compile(
            r"(?i:(?<!n[ée]\s)\ble\b|d[ée]livr[ée]e?\s*le|تاريخ\s*التسليم|سلمت?\s*في|بتاريخ)\s*[.:]?\s*(" + _DATE + r")"
        ),
        labelled=True,
    ),
    # The last date of the card, when it is not the only one. Group 1 is set
    # only for a strict DD/MM/YYYY date.
    FieldPattern(
        "later_date",
        re.compile(r"\b(?:(\d{2}/\d{2}/\d{4})|" + _DATE + r")\b"),
        last=True,
    ),
)

_LICENCE_ISSUE_LOCATION: Tuple[FieldPattern, ...] = (
    FieldPattern(
        "issue_place_label",
        re.compile(r"(?i:d[ée]livr[ée]e?\s*[àa]|سلمت?\s*ب)[^\S\n]*[.:]?[^\S\n]*" + _NOT_LABEL + r"([A-Z][A-Za-z\-]{2,20})"),
        labelled=True,
    ),
    FieldPattern("known_city", _CITY_RX),
    FieldPattern("arabic_city", _ARABIC_CITY_RX),
)

_NATIONALITY: Tuple[FieldPattern, ...] = (
    FieldPattern(
        "nationality_label",
        re.compile(r"(?i:nationalit[ée]|الجنسية)[^\S\n]*[/.]?[^\S\n]*" + _NOT_LABEL + r"([A-Z][A-Za-z]{2,20})"),
        labelled=True,
    ),
    FieldPattern("nationality_keyword", re.compile(r"\b(MOROCCAN|MAROCAINE|MAROCAIN)\b", re.IGNORECASE)),
    FieldPattern(
        "nationality_arabic",
        re.compile("(?<![" + _ARABIC_LETTER + "])(مغربية|مغربي)(?![" + _ARABIC_LETTER + "])"),
    ),
)

# full_name is recovered by services.names, not by a pattern table.
FIELD_PATTERNS: Mapping[str, Tuple[FieldPattern, ...]] = MappingProxyType(
    {
        FieldName.LICENCE_NUMBER.value: _LICENCE_NUMBER,
        FieldName.DATE_OF_BIRTH.value: _DATE_OF_BIRTH,
        FieldName.PLACE_OF_BIRTH.value: _PLACE_OF_BIRTH,
        FieldName.ID_NUMBER.value: _ID_NUMBER,
        FieldName.LICENCE_ISSUE_DATE.value: _LICENCE_ISSUE_DATE,
        FieldName.LICENCE_ISSUE_LOCATION.value: _LICENCE_ISSUE_LOCATION,
        FieldName.NATIONALITY.value: _NATIONALITY,
    }
)
