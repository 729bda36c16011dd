from licence_ocr.ocr.labels import CANONICAL_FIELDS, FieldName, field_key, is_canonical_field


def test_canonical_order():
    assert CANONICAL_FIELDS == (
        "licence_number",
        "full_name",
        "date_of_birth",
        "place_of_birth",
        "id_number",
        "licence_issue_date",
        "licence_issue_location",
        "nationality",
    )


def test_field_key_and_membership():
    assert field_key(FieldName.ID_NUMBER) == "id_number"
    assert field_key("id_number") == "id_number"
    assert is_canonical_field(FieldName.NATIONALITY)
    assert is_canonical_field("full_name")
    assert not is_canonical_field("expiry_date")
