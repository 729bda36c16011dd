from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass
class ExtractionSettings:
    min_confidence: int = int(os.getenv("EXTRACTION_MIN_CONFIDENCE", 60))


DEFAULT_EXTRACTION = ExtractionSettings()


@dataclass
class ApiSettings:
    max_text_chars: int = int(os.getenv("EXTRACT_MAX_TEXT_CHARS", 20000))
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", "")


DEFAULT_API = ApiSettings()
