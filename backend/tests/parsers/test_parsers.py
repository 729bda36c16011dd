from licence_ocr.parsers import parse_date, parse_name, parse_place


def test_parse_date_dmy():
    r = parse_date("15/03/1985")
    assert r.date == "15/03/1985"
    assert r.confidence == 0.9
    assert r.format == "DMY"


def test_parse_date_rejects_out_of_range_month():
    r = parse_date("31/13/2024")
    assert r.date == ""
    assert r.confidence == 0


def test_parse_date_alternate_orders_and_padding():
    assert parse_date("12/25/2020").date == "25/12/2020"
    assert parse_date("12/25/2020").format == "MDY"
    assert parse_date("1985-03-15").date == "15/03/1985"
    assert parse_date("5/3/1990").date == "05/03/1990"
    assert parse_date("born 15 03 1985").date == "15/03/1985"


def test_parse_date_no_match():
    assert parse_date("01/01/1850").date == ""
    assert parse_date(None).date == ""
    assert parse_date("no date here").confidence == 0


def test_parse_place_after_date():
    r = parse_place("08/09/1977 EDMONTON CANADA")
    assert r.place == "EDMONTON CANADA"
    assert r.confidence == 0.8


def test_parse_place_requires_uppercase_words():
    assert parse_place("Oujda").place == ""
    assert parse_place(None).place == ""


def test_parse_name_latin_and_arabic():
    r = parse_name("ALAMI YOUSSEF\nيوسف العلوي")
    assert r.latin == "ALAMI YOUSSEF"
    assert r.arabic == "يوسف العلوي"
    assert r.primary == "ALAMI YOUSSEF"
    assert r.confidence == 0.8


def test_parse_name_arabic_only_and_preference():
    r = parse_name("يوسف العلوي")
    assert r.latin == ""
    assert r.primary == "يوسف العلوي"
    assert r.confidence == 0.6
    both = parse_name("ALAMI YOUSSEF\nيوسف العلوي", prefer_latin=False)
    assert both.primary == "يوسف العلوي"
    assert parse_name("").confidence == 0
