import pytest

from licence_ocr.ocr.labels import FieldName
from licence_ocr.pipeline.postprocess import parse_and_normalize


def test_dates_are_padded():
    r = parse_and_normalize("date_of_birth", "8/9/1977")
    assert r == {"norm": "08/09/1977", "parse_ok": True, "parse_err": None}


def test_unparseable_date_and_empty():
    r = parse_and_normalize("licence_issue_date", "99/99/9999")
    assert not r["parse_ok"] and r["parse_err"] == "DATE_INVALID"
    assert parse_and_normalize("date_of_birth", "")["parse_err"] == "EMPTY"


@pytest.mark.parametrize(
    "field,raw,expected",
    [
        ("place_of_birth", "EDMONTON CANADA", "Edmonton Canada"),
        ("licence_issue_location", "وجدة", "Oujda"),
        ("licence_issue_location", "أكادير", "Agadir"),
        ("id_number", "ct 801.898", "CT801898"),
        ("licence_number", "06/269094", "06/269094"),
        ("nationality", "MAROCAINE", "Moroccan"),
        ("nationality", "مغربية", "Moroccan"),
        ("nationality", "french", "French"),
        ("full_name", "HUSSEIN  AMRANI", "Hussein Amrani"),
        (FieldName.FULL_NAME, "youssef alami", "Youssef Alami"),
    ],
)
def test_field_normalisation(field, raw, expected):
    r = parse_and_normalize(field, raw)
    assert r["parse_ok"]
    assert r["norm"] == expected


def test_unknown_field_is_left_alone():
    assert parse_and_normalize("expiry_date", "01/01/2030") == {"norm": None, "parse_ok": False, "parse_err": None}
