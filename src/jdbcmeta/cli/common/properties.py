"""Parsing of `key=value` property options."""

from typing import Iterable


def parse_property_options(items: Iterable[str]) -> dict[str, str]:
    """
    Convert repeated `--property key=value` options into a mapping.

    Later occurrences of a key override earlier ones. Values may contain `=`.

    Raises:
        ValueError: If an item has no `=` or an empty key.
    """
    props: dict[str, str] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"Invalid property: '{item}' (expected key=value)")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid property: '{item}' (empty key)")
        props[key] = value
    return props
