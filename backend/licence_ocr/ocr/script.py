from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, List, Sequence, Union


class ScriptType(str, Enum):
    ARABIC = "arabic"
    LATIN = "latin"
    MIXED = "mixed"
    NUMERIC = "numeric"
    UNKNOWN = "unknown"


# Code point ranges (inclusive). Arabic covers the base block, supplement,
# Extended-A and both presentation-form blocks; Arabic-Indic digits fall in
# the base block and therefore count as Arabic.
_ARABIC_RANGES = (
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
)
_LATIN_RANGES = (
    (0x0041, 0x005A),
    (0x0061, 0x007A),
    (0x00C0, 0x00FF),
    (0x0100, 0x017F),
    (0x0180, 0x024F),
)

_MAJORITY_RATIO = 0.6
_MIXED_RATIO = 0.2

_DIGITS_ONLY_RX = re.compile(r"^\d+$")


def _in_ranges(code: int, ranges) -> bool:
    for lo, hi in ranges:
        if lo <= code <= hi:
            return True
    return False


def detect_script(text: Any) -> ScriptType:
    """Classify a text span by writing system.

    Counts Arabic, Latin, ASCII-digit and other characters over the trimmed
    text and applies, in order: arabic > 0.6, latin > 0.6, both > 0.2 (mixed),
    digits without letters (numeric), otherwise unknown.
    """
    if not isinstance(text, str):
        return ScriptType.UNKNOWN
    s = text.strip()
    if not s:
        return ScriptType.UNKNOWN

    arabic = latin = digits = other = 0
    for ch in s:
        code = ord(ch)
        if _in_ranges(code, _ARABIC_RANGES):
            arabic += 1
        elif _in_ranges(code, _LATIN_RANGES):
            latin += 1
        elif 0x30 <= code <= 0x39:
            digits += 1
        else:
            other += 1

    total = arabic + latin + digits + other
    arabic_ratio = arabic / total
    latin_ratio = latin / total

    if arabic_ratio > _MAJORITY_RATIO:
        return ScriptType.ARABIC
    if latin_ratio > _MAJORITY_RATIO:
        return ScriptType.LATIN
    if arabic_ratio > _MIXED_RATIO and latin_ratio > _MIXED_RATIO:
        return ScriptType.MIXED
    if digits > 0 and arabic + latin == 0:
        return ScriptType.NUMERIC
    return ScriptType.UNKNOWN


def _script_accepted(script: ScriptType, token: str, preferred: str, allow_mixed: bool) -> bool:
    if preferred == ScriptType.LATIN.value:
        return script in (ScriptType.LATIN, ScriptType.NUMERIC) or (allow_mixed and script == ScriptType.MIXED)
    if preferred == ScriptType.ARABIC.value:
        return script == ScriptType.ARABIC or (allow_mixed and script == ScriptType.MIXED)
    if preferred == ScriptType.NUMERIC.value:
        return script == ScriptType.NUMERIC or bool(_DIGITS_ONLY_RX.match(token))
    if preferred == "any":
        return script != ScriptType.UNKNOWN
    return True


def filter_tokens_by_script(
    tokens: Any,
    preferred_script: Union[ScriptType, str],
    *,
    allow_mixed: bool = True,
    min_token_length: int = 1,
    exclude_patterns: Sequence[str] = (),
) -> List[str]:
    """Keep the tokens whose script matches ``preferred_script``.

    Tokens are trimmed before the length and exclusion checks, but returned
    as given. Non-string entries are dropped. ``exclude_patterns`` are regex
    sources matched case-insensitively anywhere in the token.
    """
    if not isinstance(tokens, (list, tuple)):
        return []
    preferred = preferred_script.value if isinstance(preferred_script, ScriptType) else str(preferred_script)
    excludes = [re.compile(p, re.IGNORECASE) for p in exclude_patterns]

    kept: List[str] = []
    for token in tokens:
        if not token or not isinstance(token, str):
            continue
        clean = token.strip()
        if len(clean) < min_token_length:
            continue
        if any(rx.search(clean) for rx in excludes):
            continue
        if _script_accepted(detect_script(clean), clean, preferred, allow_mixed):
            kept.append(token)
    return kept


def _extract_script_text(text: Any, script: ScriptType, min_word_length: int) -> str:
    if not text or not isinstance(text, str):
        return ""
    words = text.split()
    kept = filter_tokens_by_script(words, script, min_token_length=min_word_length, allow_mixed=False)
    return re.sub(r"\s+", " ", " ".join(kept)).strip()


def extract_latin_text(text: Any, *, min_word_length: int = 2) -> str:
    return _extract_script_text(text, ScriptType.LATIN, min_word_length)


def extract_arabic_text(text: Any, *, min_word_length: int = 1) -> str:
    return _extract_script_text(text, ScriptType.ARABIC, min_word_length)


_NUMERIC_RX = re.compile(r"\b\d+\b")
_FORMATTED_RXS = (
    re.compile(r"\b\d{1,4}[/\-.]\d{1,4}[/\-.]\d{1,4}\b"),  # dates
    re.compile(r"\b[A-Z]{2}\d{6,8}\b"),  # CNIE
    re.compile(r"\b\d{2,3}/\d{6,8}\b"),  # licence number
)


def extract_numeric_tokens(
    text: Any,
    *,
    include_formatted: bool = True,
    min_digits: int = 1,
    max_digits: int = 20,
) -> List[str]:
    """Return digit runs and formatted numbers found in ``text``.

    Matches of every pattern are concatenated in pattern order, so a date
    contributes both its digit groups and the full ``DD/MM/YYYY`` form.
    """
    if not text or not isinstance(text, str):
        return []
    patterns: Iterable[re.Pattern] = (_NUMERIC_RX,) + (_FORMATTED_RXS if include_formatted else ())
    matches: List[str] = []
    for rx in patterns:
        matches.extend(rx.findall(text))
    out: List[str] = []
    for m in matches:
        n = sum(1 for ch in m if ch.isdigit())
        if min_digits <= n <= max_digits:
            out.append(m)
    return out


__all__ = [
    "ScriptType",
    "detect_script",
    "filter_tokens_by_script",
    "extract_latin_text",
    "extract_arabic_text",
    "extract_numeric_tokens",
]
