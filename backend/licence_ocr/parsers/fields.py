from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from licence_ocr.ocr.script import ScriptType, detect_script, extract_arabic_text, extract_latin_text
from licence_ocr.ocr.text_utils import normalize_digits


@dataclass
class DateParse:
    date: str = ""
    confidence: float = 0.0
    format: str = ""
    raw: str = ""


@dataclass
class PlaceParse:
    place: str = ""
    confidence: float = 0.0


@dataclass
class NameParse:
    latin: str = ""
    arabic: str = ""
    primary: str = ""
    confidence: float = 0.0


DATE_CONFIDENCE = 0.9
PLACE_CONFIDENCE = 0.8
LATIN_NAME_CONFIDENCE = 0.8
ARABIC_NAME_CONFIDENCE = 0.6

MIN_YEAR = 1900
MAX_YEAR = 2030

# Priority order matters: DMY and MDY share a shape, MDY only wins when the
# DMY reading is out of range (e.g. 12/25/2020).
_DATE_PATTERNS = (
    (re.compile(r"\b(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})\b"), "DMY"),
    (re.compile(r"\b(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})\b"), "MDY"),
    (re.compile(r"\b(\d{4})[/\-.](\d{1,2})[/\-.](\d{1,2})\b"), "YMD"),
    (re.compile(r"\b(\d{1,2})\s+(\d{1,2})\s+(\d{4})\b"), "DMY"),
)

_EMBEDDED_DATE_RXS = (
    re.compile(r"\b\d{1,2}[/\-.]\d{1,2}[/\-.]\d{4}\b"),
    re.compile(r"\b\d{1,2}\s+\d{1,2}\s+\d{4}\b"),
)

_PLACE_SHAPE_RX = re.compile(r"^[A-Z\s]{3,}$")
_LATIN_NAME_RX = re.compile(r"^[A-Z]+(?: [A-Z]+)+$")


def _split_date(parts, fmt: str):
    a, b, c = parts
    if fmt == "DMY":
        return a, b, c
    if fmt == "MDY":
        return b, a, c
    return c, b, a  # YMD


def parse_date(text: Any) -> DateParse:
    """Parse the first structurally valid date in ``text`` as DD/MM/YYYY."""
    if not text or not isinstance(text, str):
        return DateParse()
    s = normalize_digits(text)
    for rx, fmt in _DATE_PATTERNS:
        m = rx.search(s)
        if not m:
            continue
        day, month, year = _split_date(m.groups(), fmt)
        d, mo, y = int(day), int(month), int(year)
        if 1 <= d <= 31 and 1 <= mo <= 12 and MIN_YEAR <= y <= MAX_YEAR:
            return DateParse(
                date=f"{day.zfill(2)}/{month.zfill(2)}/{year}",
                confidence=DATE_CONFIDENCE,
                format=fmt,
                raw=m.group(0),
            )
    return DateParse()


def parse_place(
    text: Any,
    *,
    exclude_date_pattern: bool = True,
    min_place_length: int = 3,
    max_place_length: int = 50,
) -> PlaceParse:
    if not text or not isinstance(text, str):
        return PlaceParse()
    s = text
    if exclude_date_pattern:
        for rx in _EMBEDDED_DATE_RXS:
            s = rx.sub("", s)
    latin = extract_latin_text(s, min_word_length=2)
    if min_place_length <= len(latin) <= max_place_length and _PLACE_SHAPE_RX.match(latin):
        return PlaceParse(place=latin.strip(), confidence=PLACE_CONFIDENCE)
    return PlaceParse()


def parse_name(
    text: Any,
    *,
    prefer_latin: bool = True,
    include_arabic: bool = True,
    min_name_length: int = 2,
    max_name_length: int = 50,
) -> NameParse:
    """Pick the first Latin and the first Arabic name line of a transcript.

    A Latin name must be two or more uppercase words; the Arabic name is the
    Arabic-only part of the first Arabic or mixed line.
    """
    if not text or not isinstance(text, str):
        return NameParse()
    lines = [ln.strip() for ln in text.split("\n") if ln.strip()]

    latin_name = ""
    arabic_name = ""
    confidence = 0.0
    for line in lines:
        script = detect_script(line)
        if script in (ScriptType.LATIN, ScriptType.MIXED) and not latin_name:
            extracted = extract_latin_text(line, min_word_length=min_name_length)
            if min_name_length <= len(extracted) <= max_name_length and _LATIN_NAME_RX.match(extracted):
                latin_name = extracted
                confidence = max(confidence, LATIN_NAME_CONFIDENCE)
        if script in (ScriptType.ARABIC, ScriptType.MIXED) and not arabic_name and include_arabic:
            extracted = extract_arabic_text(line, min_word_length=1)
            if 1 <= len(extracted) <= max_name_length:
                arabic_name = extracted
                confidence = max(confidence, ARABIC_NAME_CONFIDENCE)

    primary = (latin_name or arabic_name) if prefer_latin else (arabic_name or latin_name)
    return NameParse(latin=latin_name, arabic=arabic_name, primary=primary, confidence=confidence)
