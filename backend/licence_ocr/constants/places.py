from __future__ import annotations

from types import MappingProxyType

# Cities printed on Moroccan licences, as they appear in the Latin zone.
MOROCCAN_CITIES = (
    "CASABLANCA",
    "RABAT",
    "FES",
    "MARRAKECH",
    "OUJDA",
    "AGADIR",
    "MEKNES",
    "TANGER",
    "TETOUAN",
    "KENITRA",
    "NADOR",
    "SAFI",
    "SALE",
    "TAZA",
    "BERKANE",
    "LAAYOUNE",
    "ESSAOUIRA",
    "EL JADIDA",
    "BENI MELLAL",
    "KHOURIBGA",
)

# Arabic spellings of the same cities, keyed by the letter-normalised form.
ARABIC_CITY_NAMES = MappingProxyType(
    {
        "الدار البيضاء": "CASABLANCA",
        "الرباط": "RABAT",
        "فاس": "FES",
        "مراكش": "MARRAKECH",
        "وجدة": "OUJDA",
        "اكادير": "AGADIR",
        "مكناس": "MEKNES",
        "طنجة": "TANGER",
        "تطوان": "TETOUAN",
        "القنيطرة": "KENITRA",
        "الناظور": "NADOR",
        "بركان": "BERKANE",
    }
)

# Countries that close a "CITY COUNTRY" birthplace for holders born abroad.
COUNTRIES = (
    "MAROC",
    "MOROCCO",
    "CANADA",
    "FRANCE",
    "ESPAGNE",
    "SPAIN",
    "BELGIQUE",
    "BELGIUM",
    "ITALIE",
    "ITALY",
    "ALLEMAGNE",
    "GERMANY",
    "PAYS BAS",
    "ALGERIE",
    "TUNISIE",
    "USA",
)

# Headers that identify a document issued by the Kingdom of Morocco.
KINGDOM_HEADER_MARKERS = (
    "ROYAUME DU MAROC",
    "KINGDOM OF MOROCCO",
    "المملكة المغربية",
)

DEFAULT_NATIONALITY = "Moroccan"

NATIONALITY_ALIASES = MappingProxyType(
    {
        "MAROCAINE": DEFAULT_NATIONALITY,
        "MAROCAIN": DEFAULT_NATIONALITY,
        "MOROCCAN": DEFAULT_NATIONALITY,
        "مغربية": DEFAULT_NATIONALITY,
        "مغربي": DEFAULT_NATIONALITY,
    }
)
