"""
Name normalization helpers.

Cliche names are stored under a normalized key and turned back into a
readable form only for display.
"""

import re

_WHITESPACE = re.compile(r"\s+", re.ASCII)


def symbolize_name(name: str) -> str:
    """
    Converts a human name into the key used to store a cliche.

    The name is lowercased and every run of whitespace becomes a single
    underscore, so "Sword  Fighting" and "sword fighting" share the key
    "sword_fighting".

    Args:
        name (str): The human-entered name.

    Returns:
        str: The normalized key.

    """
    return _WHITESPACE.sub("_", name.lower())


def humanize_name(key: str) -> str:
    """
    Converts a normalized key into a display name.

    Only meant for display: lookups must go through symbolize_name().

    Args:
        key (str): The normalized key.

    Returns:
        str: The key with each underscore-separated part capitalized.

    """
    return " ".join(part.capitalize() for part in key.split("_"))
