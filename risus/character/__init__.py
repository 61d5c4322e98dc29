"""
Character system module for the Risus package.

This module handles characters and their cliches, their display, and the
packing of both into text.
"""

from .character_display import CharacterDisplay
from .character_serialization import (
    cliche_from_pack,
    pack_character,
    pack_cliche,
    unpack_character,
    unpack_cliche,
)
from .cliche import Cliche
from .main import Character

__all__ = [
    # Import from character_display.py
    "CharacterDisplay",
    # Import from character_serialization.py
    "cliche_from_pack",
    "pack_character",
    "pack_cliche",
    "unpack_character",
    "unpack_cliche",
    # Import from cliche.py
    "Cliche",
    # Import from main.py
    "Character",
]
