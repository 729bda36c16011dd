from __future__ import annotations

import re
import unicodedata

import arabic_reshaper
from bidi.algorithm import get_display

# Text helpers shared by the parsers and the extraction pipeline. Everything
# here is a pure str -> str transform.

# Arabic-Indic and extended (Persian/Urdu) digits both show up in OCR output.
_DIGITS = str.maketrans("٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹", "0123456789" * 2)

# Alef variants, alef maqsura and hamza carriers folded to a base letter;
# tatweel dropped.
_LETTERS = str.maketrans({"إ": "ا", "أ": "ا", "آ": "ا", "ٱ": "ا", "ى": "ي", "ئ": "ي", "ؤ": "و", "ـ": None})

# Zero-width joiners, directional marks/embeddings/isolates and the
# variation selectors OCR engines emit around star glyphs.
_CONTROL_RX = re.compile("[\u200b\u200c\u200e\u200f\u202a-\u202e\u2066-\u2069\ufe0e\ufe0f]")

# Decorative glyphs and punctuation the licence template prints around
# labels (stars, map pins, bullets, quotes) plus typical OCR speckle.
# Degree/ordinal signs are kept: they belong to the "N°" labels.
_NOISE_RX = re.compile(r"[★✶✳✴☆•·\"“”‘’'`:;^~´¨|«»،٫]+")
_DASH_RX = re.compile(r"[‐‑‒–—―−]")
_PERMIS_MISREAD_RX = re.compile(r"\b(?:Perinis|Pernis|Permls|Pemis)\b", re.IGNORECASE)
_HSPACE_RX = re.compile(r"[^\S\n]+")


def normalize_digits(text: str) -> str:
    return text.translate(_DIGITS) if text else text


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_arabic_letters(text: str) -> str:
    """Fold Arabic letter variants so name and city tokens compare equal.

    OCR confuses the alef forms and the hamza carriers on licence scans;
    lookup tables are keyed by the folded form.
    """
    return text.translate(_LETTERS) if text else text


def fix_arabic_text(text: str, *, for_display: bool = True) -> str:
    if not text:
        return text
    s = normalize_arabic_letters(unicodedata.normalize("NFKC", text))
    s = strip_diacritics(normalize_digits(s))
    s = " ".join(_CONTROL_RX.sub("", s).split())
    if for_display:
        # Presentation forms plus bidi reordering for terminals and CSV viewers.
        return get_display(arabic_reshaper.reshape(s))
    return s


def preprocess_text(text: str) -> str:
    """Strip OCR noise from a licence transcript while keeping its lines.

    Folds Arabic-Indic digits, removes tatweel and directional marks, replaces
    decorative glyphs with spaces, unifies dash variants, repairs common
    misreads of "Permis", collapses horizontal whitespace and drops blank
    lines. Applying it twice gives the same text.
    """
    if not text:
        return ""
    s = text.replace("\r\n", "\n").replace("\r", "\n")
    s = _CONTROL_RX.sub("", normalize_digits(s)).replace("ـ", "")
    s = _NOISE_RX.sub(" ", s)
    s = _DASH_RX.sub("-", s)
    s = _PERMIS_MISREAD_RX.sub("Permis", s)
    lines = (_HSPACE_RX.sub(" ", line).strip() for line in s.split("\n"))
    return "\n".join(line for line in lines if line)


def clean_ocr_text(
    text: str,
    *,
    remove_extra_spaces: bool = True,
    remove_punctuation: bool = False,
    normalize_case: bool = False,
    remove_special_chars: bool = False,
) -> str:
    if not text or not isinstance(text, str):
        return ""
    s = text
    if remove_extra_spaces:
        s = re.sub(r"\s+", " ", s).strip()
    if remove_punctuation:
        # keep separators used by dates and document numbers
        s = re.sub(r"[^\w\s\-/.]", "", s)
    if normalize_case:
        s = s.upper()
    if remove_special_chars:
        s = re.sub(r"[^\w\s]", "", s)
    return s


def to_title_case(text: str) -> str:
    if not text:
        return ""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text.lower())
