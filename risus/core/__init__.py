"""
Core system module for the Risus package.

This module contains the constants, name normalization, exceptions, logging
and console utilities shared by the character modules.
"""

from .constants import (
    CLICHE_FIELD_SEPARATOR,
    CLICHE_SEPARATOR,
    DEFAULT_FUNKY_DIE,
    GLOBAL_VERBOSE_LEVEL,
    RECORD_SEPARATOR,
    FunkyDie,
    NiceEnum,
)
from .error_handling import (
    FormatError,
    MalformedCharacterRecord,
    MalformedClicheRecord,
    RisusError,
)
from .logging import get_logger, setup_logging
from .naming import humanize_name, symbolize_name
from .utils import (
    ccapture,
    cprint,
    crule,
    is_leading_int_nonzero,
    match_leading_int,
    parse_leading_int,
)

__all__ = [
    # Import from constants.py
    "CLICHE_FIELD_SEPARATOR",
    "CLICHE_SEPARATOR",
    "DEFAULT_FUNKY_DIE",
    "GLOBAL_VERBOSE_LEVEL",
    "RECORD_SEPARATOR",
    "FunkyDie",
    "NiceEnum",
    # Import from error_handling.py
    "FormatError",
    "MalformedCharacterRecord",
    "MalformedClicheRecord",
    "RisusError",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from naming.py
    "humanize_name",
    "symbolize_name",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "is_leading_int_nonzero",
    "match_leading_int",
    "parse_leading_int",
]
