"""
Query encoding for DIA requests.

Two wire formats are produced here:

- form style, ``key=value`` terms joined by ``&`` (request bodies)
- pipe style, ``key|value`` strings (the ``link`` parameter of process calls)
"""
from collections.abc import Mapping
from typing import Any, List
from urllib.parse import quote_plus

from ..exceptions import InvalidArgumentError


def is_sequence(value: Any) -> bool:
    """Whether a value expands into one wire term per element."""
    return isinstance(value, (list, tuple))


def format_value(value: Any) -> str:
    """Render a scalar the way the service expects it."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _form_term(key: Any, value: Any) -> str:
    return f"{quote_plus(format_value(key))}={quote_plus(format_value(value))}"


def encode_form(options: Mapping) -> str:
    """
    Encode a mapping as an ``application/x-www-form-urlencoded`` body.

    Sequence values are expanded into one term per element, repeating the
    key. All expanded terms come before the scalar terms; each group keeps
    the mapping's key order.

    Example:
        >>> encode_form({'key': '123456', 'names': ['austin', 'seth']})
        'names=austin&names=seth&key=123456'
    """
    expanded = []
    scalars = []
    for key, value in options.items():
        if is_sequence(value):
            expanded.extend(_form_term(key, element) for element in value)
        else:
            scalars.append(_form_term(key, value))
    return '&'.join(expanded + scalars)


def encode_link_pairs(links: Mapping) -> List[str]:
    """
    Flatten a link mapping into ``key|value`` strings.

    Args:
        links: Mapping of table name to a key or a sequence of keys

    Returns:
        One string per pair, in key order and then element order

    Raises:
        InvalidArgumentError: If links is not a mapping
    """
    if not isinstance(links, Mapping):
        raise InvalidArgumentError(
            f"link pairs require a mapping, got {type(links).__name__}"
        )

    pairs = []
    for key, value in links.items():
        values = value if is_sequence(value) else [value]
        pairs.extend(f"{key}|{format_value(element)}" for element in values)
    return pairs
