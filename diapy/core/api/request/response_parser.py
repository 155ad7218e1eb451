"""
Parsers for resolved DIA response bodies.

Requests are always sent with ``simple=true``, so get calls answer with
plain XML of the form::

    <data organization_KEY="123">
      <supporter>
        <item>
          <supporter_KEY>1</supporter_KEY>
          <Email>test@domain.org</Email>
        </item>
        <count>1</count>
      </supporter>
    </data>
"""
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from ...exceptions import ResponseParseError


def parse_get_response(body: str, table: Optional[str] = None) -> List[Dict[str, str]]:
    """
    Parse a get response into one dict per item.

    Args:
        body: Response body
        table: Only read items under this table element when given

    Returns:
        Items in document order, child tag mapped to child text

    Raises:
        ResponseParseError: If the body is not well-formed XML
    """
    if not body or not body.strip():
        return []

    try:
        root = ET.fromstring(body.strip())
    except ET.ParseError as e:
        raise ResponseParseError(f"Invalid XML response: {e}") from e

    scope = root
    if table is not None:
        # fall back to the whole document if the table element is missing
        scope = next(root.iter(table), None)
        if scope is None:
            scope = root

    return [
        {child.tag: (child.text or '').strip() for child in item}
        for item in scope.iter('item')
    ]


def parse_process_response(body: str) -> Optional[str]:
    """Key of the saved object, or None when the body is empty."""
    key = (body or '').strip()
    return key or None
