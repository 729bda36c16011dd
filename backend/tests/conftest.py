import os
import sys

import pytest

# Ensure 'licence_ocr' package (under backend/licence_ocr) is importable as top-level
PROJECT_BACKEND = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_BACKEND not in sys.path:
    sys.path.insert(0, PROJECT_BACKEND)


LICENCE_TRANSCRIPT = "\n".join(
    [
        "ROYAUME DU MAROC",
        "المملكة المغربية",
        "PERMIS DE CONDUIRE",
        "رخصة السياقة",
        "Permis N° 06/269094",
        "Date et Lieu de naissance",
        "08/09/1977 EDMONTON CANADA",
        "N° C.N.I.E CT801898",
        "Délivré à OUJDA Le 12/05/2015",
    ]
)


@pytest.fixture
def licence_transcript() -> str:
    return LICENCE_TRANSCRIPT
