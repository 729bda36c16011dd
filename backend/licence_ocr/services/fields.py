from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from licence_ocr.validations.confidence import score_candidate
from licence_ocr.validations.patterns import FieldPattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldCandidate:
    value: str
    confidence: int
    source: str


def extract_field_value(
    text: str, patterns: Sequence[FieldPattern], field_name: str
) -> Optional[FieldCandidate]:
    """Best pattern hit for ``field_name``, or None when nothing matches.

    Every pattern is tried and contributes at most one match. Hits are
    ranked by score; on ties the earlier pattern wins.
    """
    if not text or not isinstance(text, str):
        return None

    hits: List[FieldCandidate] = []
    for pattern in patterns:
        m = pattern.find(text)
        if not m:
            continue
        raw = m.group(1) if m.re.groups else m.group(0)
        value = (raw or "").strip()
        if not value:
            continue
        hits.append(
            FieldCandidate(
                value=value,
                confidence=score_candidate(field_name, value, labelled=pattern.labelled),
                source=f"pattern:{pattern.name}",
            )
        )

    if not hits:
        logger.debug("field_no_match", extra={"field": field_name, "patterns": len(patterns)})
        return None
    hits = sorted(hits, key=lambda c: c.confidence, reverse=True)
    best = hits[0]
    logger.debug(
        "field_candidates_ranked",
        extra={"field": field_name, "hits": len(hits), "source": best.source, "confidence": best.confidence},
    )
    return best
