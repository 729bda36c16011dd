import re

from licence_ocr.services.fields import FieldCandidate, extract_field_value
from licence_ocr.validations.patterns import FIELD_PATTERNS, FieldPattern


def test_best_hit_is_labelled_licence_number(licence_transcript):
    c = extract_field_value(licence_transcript, FIELD_PATTERNS["licence_number"], "licence_number")
    assert c == FieldCandidate("06/269094", 100, "pattern:licence_label")


def test_shape_pattern_without_label():
    c = extract_field_value("N° 12/345678", FIELD_PATTERNS["licence_number"], "licence_number")
    assert c.value == "12/345678"
    assert c.confidence == 90
    assert c.source == "pattern:licence_shape"


def test_no_match_returns_none():
    assert extract_field_value("nothing useful", FIELD_PATTERNS["id_number"], "id_number") is None
    assert extract_field_value("", FIELD_PATTERNS["id_number"], "id_number") is None


def test_whole_match_without_group_and_stable_ties():
    c = extract_field_value("xx ABC yy", (FieldPattern("plain", re.compile(r"ABC")),), "custom")
    assert c == FieldCandidate("ABC", 60, "pattern:plain")
    patterns = (
        FieldPattern("first", re.compile(r"(FOO)")),
        FieldPattern("second", re.compile(r"(BAR)")),
    )
    assert extract_field_value("BAR FOO", patterns, "custom").source == "pattern:first"
