import pytest

from licence_ocr.ocr import (
    ScriptType,
    detect_script,
    extract_arabic_text,
    extract_latin_text,
    extract_numeric_tokens,
    filter_tokens_by_script,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("مرحبا", ScriptType.ARABIC),
        ("HELLO", ScriptType.LATIN),
        ("abc مرحبا", ScriptType.MIXED),
        ("12345", ScriptType.NUMERIC),
        ("", ScriptType.UNKNOWN),
        ("   ", ScriptType.UNKNOWN),
        ("!!!", ScriptType.UNKNOWN),
        (None, ScriptType.UNKNOWN),
    ],
)
def test_detect_script_boundaries(text, expected):
    assert detect_script(text) == expected


def test_filter_tokens_latin_keeps_numbers_and_drops_junk():
    tokens = ["HELLO", "مرحبا", "123", 5, "", None]
    assert filter_tokens_by_script(tokens, "latin") == ["HELLO", "123"]
    assert filter_tokens_by_script(tokens, ScriptType.ARABIC) == ["مرحبا"]
    assert filter_tokens_by_script(tokens, "numeric") == ["123"]


def test_filter_tokens_options():
    assert filter_tokens_by_script(["AB12", "ALAMI"], "latin", exclude_patterns=[r"\d"]) == ["ALAMI"]
    assert filter_tokens_by_script(["A", "BEN"], "latin", min_token_length=2) == ["BEN"]
    assert filter_tokens_by_script(["abcمرحبا"], "latin", allow_mixed=False) == []
    assert filter_tokens_by_script("not a list", "latin") == []


def test_extract_script_text():
    line = "ROYAUME DU MAROC المملكة المغربية"
    assert extract_latin_text(line) == "ROYAUME DU MAROC"
    assert extract_arabic_text(line) == "المملكة المغربية"
    assert extract_latin_text(None) == ""


def test_extract_numeric_tokens_formats():
    tokens = extract_numeric_tokens("Permis N° 06/269094 CT801898")
    assert tokens == ["06", "269094", "CT801898", "06/269094"]
    assert extract_numeric_tokens("08/09/1977", include_formatted=False) == ["08", "09", "1977"]
    assert extract_numeric_tokens("a 1 22 333", min_digits=2) == ["22", "333"]
    assert extract_numeric_tokens(42) == []
