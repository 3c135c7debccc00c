import pytest

from edi_kit.config import ConversionOptions
from edi_kit.conversion.pipeline import DocumentConverter

EDI_DOCUMENT = (
    "ISA*00*          *00*          *12*5032337522     *01*048337914      "
    "*190225*1532*^*00501*000001367*0*P*>~\n"
    "GS*SH*5032337522*048337914*20190225*1532*1367*X*005010~\n"
    "ST*856*0001~\n"
    "BSN*00*0001*20190225*1532~\n"
    "N1*ST*CHEHALIS RSC DC - HOME/HCC*92*0612~\n"
    "N1*SF*ACME SUPPLY~\n"
    "REF*BM*12345~\n"
    "REF*CN***~\n"
    "SE*8*0001~\n"
    "GE*1*572~\n"
    "IEA*1*000001367~"
)


@pytest.fixture
def edi_document() -> str:
    return EDI_DOCUMENT


@pytest.fixture
def edi_options() -> ConversionOptions:
    return ConversionOptions(line_delimiter="~", element_delimiter="*")


@pytest.fixture
def converter() -> DocumentConverter:
    return DocumentConverter()


@pytest.fixture
def canonical() -> dict:
    """A valid document covering repeated segments and empty values."""
    return {
        "ST": [{"ST1": "856", "ST2": "0001"}],
        "N1": [
            {"N11": "ST", "N12": "CHEHALIS RSC DC - HOME/HCC", "N13": "92"},
            {"N11": "SF", "N12": "ACME SUPPLY", "N13": ""},
        ],
        "REF": [{"REF1": "BM", "REF2": "12345"}, {"REF1": "CN", "REF2": ""}],
        "SE": [{"SE1": "3", "SE2": "0001"}],
    }
