from licence_ocr.ocr.labels import FieldName
from licence_ocr.validations.confidence import (
    BASE_CONFIDENCE,
    clamp_confidence,
    overall_confidence,
    passes_threshold,
    score_candidate,
)


def test_licence_number_scores():
    assert score_candidate("licence_number", "06/269094", labelled=True) == 100
    assert score_candidate("licence_number", "06/269094") == 90
    assert score_candidate("licence_number", "12345678") == 80


def test_date_scores():
    assert score_candidate("date_of_birth", "08/09/1977") == 90
    assert score_candidate("date_of_birth", "08/09/1977", labelled=True) == 100
    assert score_candidate("date_of_birth", "8/9/1977") == 70
    assert score_candidate("date_of_birth", "08/09/2020") == 80
    assert score_candidate("licence_issue_date", "12/05/2015") == 90


def test_id_place_and_nationality_scores():
    assert score_candidate("id_number", "CT801898") == 80
    assert score_candidate(FieldName.ID_NUMBER, "CT801898", labelled=True) == 90
    assert score_candidate("place_of_birth", "EDMONTON CANADA") == 90
    assert score_candidate("place_of_birth", "OUJDA") == 80
    assert score_candidate("licence_issue_location", "وجدة") == 80
    assert score_candidate("nationality", "MAROCAINE") == 80


def test_unknown_field_gets_base():
    assert score_candidate("unknown", "anything") == BASE_CONFIDENCE


def test_clamp_and_overall():
    assert clamp_confidence(130) == 100
    assert clamp_confidence(-5) == 0
    assert overall_confidence([100, 0, 90]) == 95
    assert overall_confidence([85, 90]) == 88
    assert overall_confidence([0, 0]) == 0
    assert overall_confidence([]) == 0


def test_passes_threshold():
    assert passes_threshold(60, threshold=60)
    assert not passes_threshold(59, threshold=60)
    assert passes_threshold(150, threshold=100)
