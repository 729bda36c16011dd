from .fields import (
    DateParse,
    PlaceParse,
    NameParse,
    parse_date,
    parse_place,
    parse_name,
)

__all__ = [
    "DateParse",
    "PlaceParse",
    "NameParse",
    "parse_date",
    "parse_place",
    "parse_name",
]
