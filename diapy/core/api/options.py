"""Normalization of caller options into the shape the DIA API expects."""
from collections.abc import Mapping
from typing import Any, Dict

from .encoding import encode_link_pairs, format_value, is_sequence


def process_multiple_keys(options: Dict[str, Any]) -> Dict[str, Any]:
    """
    Collapse a sequence under ``key`` into a comma-delimited string.

    Every other entry, and a scalar ``key``, is left as is.
    """
    keys = options.get('key')
    if is_sequence(keys):
        options['key'] = ', '.join(format_value(key) for key in keys)
    return options


def process_options(table: str, options: Any = None) -> Dict[str, Any]:
    """
    Build the canonical option mapping for a table.

    Args:
        table: DIA table name
        options: None, a single key, a sequence of keys, or a mapping of
            request parameters

    Returns:
        New mapping that always holds ``table`` and ``simple=True``
    """
    if options is None:
        processed = {}
    elif isinstance(options, Mapping):
        processed = dict(options)
    else:
        processed = {'key': options}

    processed['table'] = table
    # simple responses come back as plain XML
    processed['simple'] = True
    return processed


def process_get_options(table: str, options: Any = None) -> Dict[str, Any]:
    """Options for a get call."""
    return process_multiple_keys(process_options(table, options))


def process_delete_options(table: str, options: Any = None) -> Dict[str, Any]:
    """Options for a delete call."""
    return process_multiple_keys(process_options(table, options))


def process_process_options(table: str, options: Any = None) -> Dict[str, Any]:
    """
    Options for a process (save) call.

    A ``link`` mapping such as ``{'groups': [12, 13]}`` is flattened into
    ``['groups|12', 'groups|13']`` so the body repeats the ``link`` field.
    """
    processed = process_multiple_keys(process_options(table, options))
    if isinstance(processed.get('link'), Mapping):
        processed['link'] = encode_link_pairs(processed['link'])
    return processed
