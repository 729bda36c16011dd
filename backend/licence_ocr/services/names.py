from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from licence_ocr.constants import (
    ARABIC_FIRST_NAMES,
    ARABIC_LAST_NAMES,
    KNOWN_DOCUMENTS,
    NAME_EXCLUSIONS,
    PLACEHOLDER_NAME,
)
from licence_ocr.ocr.script import extract_arabic_text, extract_numeric_tokens, filter_tokens_by_script
from licence_ocr.ocr.text_utils import normalize_arabic_letters, preprocess_text, to_title_case
from licence_ocr.validations.confidence import (
    ALONE_ON_LINE_BOOST,
    ALPHABETIC_BOOST,
    BOTH_LABELLED_CONFIDENCE,
    BOTH_UPPERCASE_CONFIDENCE,
    FINGERPRINT_SCORE,
    GENERIC_PAIR_SCORE,
    LABEL_NAME_SCORE,
    MIXED_SOURCES_CONFIDENCE,
    PLACEHOLDER_CONFIDENCE,
    SINGLE_HALF_FLOOR,
    TOP_QUARTER_BOOST,
    TRANSLITERATED_CONFIDENCE,
    TRANSLITERATION_SCORE,
    UPPERCASE_BASE_SCORE,
    clamp_confidence,
)

from .fields import FieldCandidate

logger = logging.getLogger(__name__)

SOURCE_LABEL = "label"
SOURCE_UPPERCASE = "uppercase"
SOURCE_ARABIC = "arabic"
SOURCE_FINGERPRINT = "document-specific"
SOURCE_GENERIC = "pattern:generic"
SOURCE_PLACEHOLDER = "placeholder"

LABEL_WINDOW = 5

_FIRST_NAME_LABELS = (
    re.compile(r"\bpr[ée]noms?\b", re.IGNORECASE),
    re.compile(r"ال[اإ]سم\s*الشخصي"),
)
_LAST_NAME_LABELS = (
    re.compile(r"\bnom\b", re.IGNORECASE),
    re.compile(r"ال[اإ]سم\s*العائلي"),
)

_LABEL_TOKEN_RX = re.compile(r"\b[A-Z][A-Za-z\-]{2,19}\b")
_UPPER_TOKEN_RX = re.compile(r"\b[A-Z]{3,20}\b")
_ALPHA_RX = re.compile(r"^[A-Z]+$")
_GENERIC_PAIR_RX = re.compile(r"\b([A-Z][A-Za-z]{3,})(?=[ \t]+([A-Z][A-Za-z]{3,})\b)")


@dataclass(frozen=True)
class NameHalf:
    token: str
    score: int
    source: str


@dataclass
class NameState:
    """Working state shared by the strategies of one recovery run."""

    text: str
    lines: List[str]
    first: Optional[NameHalf] = None
    last: Optional[NameHalf] = None
    trail: List[str] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.first is not None and self.last is not None

    def used(self) -> Tuple[str, ...]:
        return tuple(h.token.upper() for h in (self.first, self.last) if h is not None)


@dataclass(frozen=True)
class NameStrategy:
    tag: str
    run: Callable[[NameState], None]
    # Forced strategies run even once both halves are resolved.
    forced: bool = False


def _excluded(token: str) -> bool:
    return token.upper() in NAME_EXCLUSIONS


def _window(lines: List[str], i: int, start: int) -> List[str]:
    # Label line first (text after the label, then the rest of the line),
    # then neighbours by distance: i+1, i-1, i+2, ...
    out = [lines[i][start:], lines[i][:start]]
    for d in range(1, LABEL_WINDOW + 1):
        for j in (i + d, i - d):
            if 0 <= j < len(lines):
                out.append(lines[j])
    return out


def _first_label_token(segments: List[str], used: Tuple[str, ...]) -> Optional[str]:
    for segment in segments:
        tokens = _LABEL_TOKEN_RX.findall(segment)
        tokens = filter_tokens_by_script(tokens, "latin", allow_mixed=False, exclude_patterns=[r"\d"])
        for token in tokens:
            if _excluded(token) or token.upper() in used:
                continue
            return token
    return None


def _find_labelled(state: NameState, labels) -> Optional[NameHalf]:
    for i, line in enumerate(state.lines):
        for rx in labels:
            m = rx.search(line)
            if not m:
                continue
            token = _first_label_token(_window(state.lines, i, m.end()), state.used())
            if token:
                return NameHalf(token, LABEL_NAME_SCORE, SOURCE_LABEL)
    return None


def _by_label(state: NameState) -> None:
    if state.first is None:
        state.first = _find_labelled(state, _FIRST_NAME_LABELS)
    if state.last is None:
        state.last = _find_labelled(state, _LAST_NAME_LABELS)


def _by_uppercase(state: NameState) -> None:
    n = len(state.lines)
    candidates: List[NameHalf] = []
    for i, line in enumerate(state.lines):
        if i >= n / 2:
            break
        for token in _UPPER_TOKEN_RX.findall(line):
            if _excluded(token):
                continue
            score = UPPERCASE_BASE_SCORE
            if line.strip() == token:
                score += ALONE_ON_LINE_BOOST
            if _ALPHA_RX.match(token):
                score += ALPHABETIC_BOOST
            if i < n / 4:
                score += TOP_QUARTER_BOOST
            candidates.append(NameHalf(token, score, SOURCE_UPPERCASE))
    candidates.sort(key=lambda c: c.score, reverse=True)

    for cand in candidates:
        if state.resolved:
            break
        if cand.token.upper() in state.used():
            continue
        if state.first is None:
            state.first = cand
        else:
            state.last = cand


def _by_transliteration(state: NameState) -> None:
    for line in state.lines:
        for token in extract_arabic_text(line).split():
            key = normalize_arabic_letters(token)
            if state.first is None and key in ARABIC_FIRST_NAMES:
                state.first = NameHalf(ARABIC_FIRST_NAMES[key], TRANSLITERATION_SCORE, SOURCE_ARABIC)
            elif state.last is None and key in ARABIC_LAST_NAMES:
                state.last = NameHalf(ARABIC_LAST_NAMES[key], TRANSLITERATION_SCORE, SOURCE_ARABIC)
        if state.resolved:
            return


def _by_fingerprint(state: NameState) -> None:
    numbers = set(extract_numeric_tokens(state.text))
    for doc in KNOWN_DOCUMENTS:
        if all(n in numbers for n in doc.numbers) and all(p in state.text for p in doc.phrases):
            state.first = NameHalf(doc.first_name, FINGERPRINT_SCORE, SOURCE_FINGERPRINT)
            state.last = NameHalf(doc.last_name, FINGERPRINT_SCORE, SOURCE_FINGERPRINT)
            return


def _by_generic_pair(state: NameState) -> None:
    if state.first is not None or state.last is not None:
        return
    for line in state.lines:
        for m in _GENERIC_PAIR_RX.finditer(line):
            a, b = m.group(1), m.group(2)
            if _excluded(a) or _excluded(b):
                continue
            state.first = NameHalf(a, GENERIC_PAIR_SCORE, SOURCE_GENERIC)
            state.last = NameHalf(b, GENERIC_PAIR_SCORE, SOURCE_GENERIC)
            return


NAME_STRATEGIES: Tuple[NameStrategy, ...] = (
    NameStrategy(SOURCE_LABEL, _by_label),
    NameStrategy(SOURCE_UPPERCASE, _by_uppercase),
    NameStrategy(SOURCE_ARABIC, _by_transliteration),
    NameStrategy(SOURCE_FINGERPRINT, _by_fingerprint, forced=True),
    NameStrategy(SOURCE_GENERIC, _by_generic_pair),
)


def _assemble(first: Optional[NameHalf], last: Optional[NameHalf]) -> FieldCandidate:
    if first is not None and last is not None:
        sources = (first.source, last.source)
        if sources == (SOURCE_LABEL, SOURCE_LABEL) or SOURCE_FINGERPRINT in sources:
            confidence = BOTH_LABELLED_CONFIDENCE
        elif sources == (SOURCE_UPPERCASE, SOURCE_UPPERCASE):
            confidence = BOTH_UPPERCASE_CONFIDENCE
        elif SOURCE_ARABIC in sources:
            confidence = TRANSLITERATED_CONFIDENCE
        else:
            confidence = MIXED_SOURCES_CONFIDENCE
        source = first.source if first.source == last.source else "+".join(sources)
        return FieldCandidate(to_title_case(f"{first.token} {last.token}"), clamp_confidence(confidence), source)

    half = first or last
    if half is not None:
        return FieldCandidate(to_title_case(half.token), clamp_confidence(max(SINGLE_HALF_FLOOR, half.score)), half.source)
    return FieldCandidate(PLACEHOLDER_NAME, PLACEHOLDER_CONFIDENCE, SOURCE_PLACEHOLDER)


def recover_full_name(text: str) -> FieldCandidate:
    """Recover the holder's name from a licence transcript.

    Runs ``NAME_STRATEGIES`` in order. Halves found by one strategy are kept
    by the next ones, which only fill what is still missing; forced
    strategies may override. The result is never empty: with nothing
    resolved the placeholder name is returned.
    """
    cleaned = preprocess_text(text) if isinstance(text, str) else ""
    state = NameState(text=cleaned, lines=cleaned.split("\n") if cleaned else [])

    for strategy in NAME_STRATEGIES:
        if state.resolved and not strategy.forced:
            continue
        before = (state.first, state.last)
        strategy.run(state)
        if (state.first, state.last) != before:
            state.trail.append(strategy.tag)
            logger.debug(
                "name_strategy_resolved",
                extra={
                    "strategy": strategy.tag,
                    "first": state.first is not None,
                    "last": state.last is not None,
                },
            )

    candidate = _assemble(state.first, state.last)
    logger.info(
        "name_recovered",
        extra={"source": candidate.source, "confidence": candidate.confidence, "strategies": list(state.trail)},
    )
    return candidate
