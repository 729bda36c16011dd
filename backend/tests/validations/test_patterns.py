import pytest

from licence_ocr.ocr.labels import CANONICAL_FIELDS
from licence_ocr.validations.patterns import FIELD_PATTERNS


def _pattern(field, name):
    return next(p for p in FIELD_PATTERNS[field] if p.name == name)


def test_table_covers_every_field_but_the_name():
    assert set(FIELD_PATTERNS) == set(CANONICAL_FIELDS) - {"full_name"}
    assert all(FIELD_PATTERNS[f] for f in FIELD_PATTERNS)


def test_licence_labels_in_both_scripts():
    rx = _pattern("licence_number", "licence_label").regex
    assert rx.search("Permis N° 06/269094").group(1) == "06/269094"
    assert rx.search("رقم الرخصة 12/345678").group(1) == "12/345678"
    assert rx.search("PERMIS DE CONDUIRE") is None


def test_cnie_label_variants():
    rx = _pattern("id_number", "cnie_label").regex
    assert rx.search("N° C.N.I.E CT801898").group(1) == "CT801898"
    assert rx.search("CNIE AB123456").group(1) == "AB123456"


def test_place_with_country_skips_kingdom_header():
    rx = _pattern("place_of_birth", "place_with_country").regex
    assert rx.search("ROYAUME DU MAROC") is None
    assert rx.search("08/09/1977 EDMONTON CANADA").group(1) == "EDMONTON CANADA"


def test_birth_place_label():
    rx = _pattern("place_of_birth", "birth_place_label").regex
    assert rx.search("Lieu de naissance: CASABLANCA").group(1) == "CASABLANCA"


def test_issue_date_patterns():
    label = _pattern("licence_issue_date", "issue_date_label").regex
    assert label.search("Délivré à OUJDA Le 12/05/2015").group(1) == "12/05/2015"
    later = _pattern("licence_issue_date", "later_date").regex
    assert later.search("08/09/1977 X 12/05/2015").group(1) == "12/05/2015"
    assert later.search("01/01/1980 02/02/2000 03/03/2010").group(1) == "03/03/2010"
    assert later.search("08/09/1977") is None


def test_issue_location_cities():
    assert _pattern("licence_issue_location", "known_city").regex.search("Délivré à OUJDA").group(1) == "OUJDA"
    assert _pattern("licence_issue_location", "arabic_city").regex.search("المدينة وجدة").group(1) == "وجدة"


def test_arabic_nationality_is_not_the_kingdom_header():
    rx = _pattern("nationality", "nationality_arabic").regex
    assert rx.search("المملكة المغربية") is None
    assert rx.search("الجنسية مغربية").group(1) == "مغربية"


def test_issue_date_label_skips_birth_phrase():
    rx = _pattern("licence_issue_date", "issue_date_label").regex
    assert rx.search("Né le 08/09/1977") is None
    assert rx.search("NÉ LE 08/09/1977") is None
    assert rx.search("Né le 08/09/1977 Délivré le 12/05/2015").group(1) == "12/05/2015"


def test_later_date_scans_long_text_once():
    later = _pattern("licence_issue_date", "later_date")
    text = "01/01/2000 " * 1800 + "1/1/2000"
    assert later.find(text).group(1) is None
    assert later.find(text + " 12/05/2015").group(1) == "12/05/2015"


@pytest.mark.parametrize(
    "field, name, text",
    [
        ("nationality", "nationality_label", "Nationalité\nDate de naissance 08/09/1977"),
        ("nationality", "nationality_label", "Nationalité Date de naissance"),
        ("licence_issue_location", "issue_place_label", "Délivré à\nOUJDA"),
        ("licence_issue_location", "issue_place_label", "Délivré à Date 12/05/2015"),
    ],
)
def test_empty_label_does_not_take_next_value(field, name, text):
    assert _pattern(field, name).find(text) is None


def test_labels_keep_same_line_values():
    assert _pattern("nationality", "nationality_label").find("Nationalité / Marocaine").group(1) == "Marocaine"
    assert _pattern("licence_issue_location", "issue_place_label").find("Délivré à OUJDA").group(1) == "OUJDA"
