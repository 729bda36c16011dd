from licence_ocr.services.extraction import extract_fields_from_ocr
from licence_ocr.validations import (
    ErrorCode,
    validate_date,
    validate_extracted_data,
    validate_id_number,
    validate_licence_number,
)


def test_validate_date_ok_and_errors():
    assert validate_date("31/12/1990").ok
    assert validate_date((1, 1, 2000)).ok
    assert validate_date("31/02/1990").code == ErrorCode.DATE_INVALID
    assert validate_date("1990-01-01").code == ErrorCode.DATE_INVALID
    assert validate_date("").code == ErrorCode.DATE_EMPTY
    r = validate_date((1, 1, 1850))
    assert not r.ok and r.code == ErrorCode.DATE_RANGE


def test_validate_licence_number():
    assert validate_licence_number("06/269094").ok
    assert validate_licence_number("12345678").ok
    assert validate_licence_number("").code == ErrorCode.LICENCE_EMPTY
    assert validate_licence_number("abc").code == ErrorCode.LICENCE_PATTERN


def test_validate_id_number_compacts():
    r = validate_id_number("ct 801898")
    assert r.ok and r.meta["value"] == "CT801898"
    assert validate_id_number("123").code == ErrorCode.ID_PATTERN
    assert validate_id_number(None).code == ErrorCode.ID_EMPTY


def test_quality_report_on_complete_extraction(licence_transcript):
    report = validate_extracted_data(extract_fields_from_ocr(licence_transcript))
    assert report.is_valid
    assert report.issues == []
    assert report.score == 97


def test_quality_report_flags_missing_fields():
    data = {
        "fields": {"full_name": "Unknown Name", "date_of_birth": "", "licence_number": ""},
        "overallConfidence": 50,
    }
    report = validate_extracted_data(data)
    assert not report.is_valid
    assert report.issues == [
        ErrorCode.NAME_PLACEHOLDER.value,
        ErrorCode.DOB_MISSING.value,
        ErrorCode.LICENCE_MISSING.value,
        ErrorCode.LOW_CONFIDENCE.value,
    ]
    assert validate_extracted_data({}).issues[0] == ErrorCode.NAME_MISSING.value
