import pytest

from edi_kit.document.models import Document
from edi_kit.document.validator import validate_document


@pytest.fixture
def document() -> Document:
    return validate_document(
        {
            "A": [{"A1": "a1", "A2": ""}, {"A1": "100", "A2": "200"}],
            "B": [{"B1": "b1", "B2": "b2"}],
        }
    )
