# src/edi_kit/detection/detector.py

import json
import logging
from collections.abc import Mapping
from typing import Any

from edi_kit.document.models import Format
from edi_kit.parsers.xml_parser import is_well_formed_xml

logger = logging.getLogger(__name__)

XML_PROLOG = "<?xml"


def looks_like_json(data: Any) -> bool:
    if isinstance(data, str):
        try:
            json.loads(data)
        except (ValueError, RecursionError):
            return False
        return True
    return isinstance(data, Mapping)


def looks_like_xml(data: str, root_tag: str = "root") -> bool:
    stripped = data.strip()
    if stripped.startswith(XML_PROLOG) or stripped.startswith(f"<{root_tag}>"):
        return True
    return is_well_formed_xml(data)


def detect_format(data: Any, root_tag: str = "root") -> Format | None:
    """Best-effort classification of untyped input.

    Checks run in priority order: JSON (a mapping, or text that decodes as
    JSON), then XML (prolog or root-tag marker, else well-formed XML), then
    any non-empty text as a delimited string. A match does not guarantee the
    input will parse or validate.

    Args:
        data: Text or an already structured object.
        root_tag: Wrapper tag that marks XML input.

    Returns:
        The detected Format, or None for empty text, None, numbers,
        booleans and lists.
    """
    if looks_like_json(data):
        fmt = Format.JSON
    elif not isinstance(data, str):
        fmt = None
    elif looks_like_xml(data, root_tag):
        fmt = Format.XML
    elif data:
        fmt = Format.STRING
    else:
        fmt = None

    logger.debug("Detected input format: %s", fmt.value if fmt else None)
    return fmt
