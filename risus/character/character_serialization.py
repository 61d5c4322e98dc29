"""
Character serialization and deserialization functions.

This module packs Character and Cliche instances into the compact text
format and unpacks them again:

    <name>;<desc>;<cliche>|<cliche>|...

where every cliche is packed as:

    <name>:<value>:<double flag>:<funky die>

The delimiters are reserved and never escaped. Unpacking is deliberately
lenient with the content of the fields (unknown dice are kept, unreadable
flags count as zero) and strict only with the structure of the records.
"""

from catchery import log_debug, log_error, log_warning

from risus.core.constants import (
    CLICHE_FIELD_SEPARATOR,
    CLICHE_SEPARATOR,
    DEFAULT_FUNKY_DIE,
    RECORD_SEPARATOR,
    FunkyDie,
)
from risus.core.error_handling import MalformedCharacterRecord, MalformedClicheRecord
from risus.core.utils import (
    is_leading_int_nonzero,
    match_leading_int,
    parse_leading_int,
)

from .cliche import Cliche
from .main import Character


def pack_cliche(cliche: Cliche) -> str:
    """
    Packs a cliche into a single record.

    Args:
        cliche (Cliche):
            The cliche to pack.

    Returns:
        str:
            The record, e.g. "mighty_thews:4:1:d6".

    """
    double = 1 if cliche.is_double else 0
    return CLICHE_FIELD_SEPARATOR.join(
        [cliche.name, str(cliche.value), str(double), str(cliche.funky)]
    )


def _parse_int_field(field: str, field_name: str, text: str) -> int:
    """Parses a numeric field, falling back to zero for unreadable text."""
    try:
        number = parse_leading_int(field)
    except ValueError:
        log_warning(
            f"Cliche {field_name} is too long to be a number, using 0",
            {"record": text, "field": field_name, "digits": len(field)},
        )
        return 0
    if number is None:
        log_warning(
            f"Cliche {field_name} '{field}' is not a number, using 0",
            {"record": text, "field": field_name, "value": field},
        )
        return 0
    return number


def unpack_cliche(text: str) -> tuple[str, int, bool, str]:
    """
    Unpacks a cliche record into its fields.

    Args:
        text (str):
            The record to unpack.

    Returns:
        tuple[str, int, bool, str]:
            The (name, value, is_double, funky) fields. The name is returned
            as found in the record.

    Raises:
        MalformedClicheRecord:
            If the record does not have exactly four fields.

    """
    fields = text.split(CLICHE_FIELD_SEPARATOR)
    if len(fields) != 4:
        log_error(
            "Cliche record must have 4 fields",
            {"record": text, "fields": len(fields)},
        )
        raise MalformedClicheRecord(text)

    name, value, is_double, funky = fields

    # Only a leading zero (or no number at all) means "not double".
    if match_leading_int(is_double) is None:
        log_debug(
            f"Cliche double flag '{is_double}' is not a number, reading it as 0",
            {"record": text},
        )
    is_double_flag = is_leading_int_nonzero(is_double)

    if not funky:
        funky = DEFAULT_FUNKY_DIE.value
    elif FunkyDie.from_tag(funky) is None:
        log_warning(
            f"Unknown funky die '{funky}', keeping it as is",
            {"record": text, "funky": funky},
        )

    return name, _parse_int_field(value, "value", text), is_double_flag, funky


def cliche_from_pack(text: str) -> Cliche:
    """
    Unpacks a cliche record and creates a Cliche from it.

    Args:
        text (str):
            The record to unpack.

    Returns:
        Cliche:
            The new cliche.

    Raises:
        MalformedClicheRecord:
            If the record does not have exactly four fields.

    """
    name, value, is_double, funky = unpack_cliche(text)
    return Cliche(name=name, value=value, is_double=is_double, funky=funky)


def pack_character(character: Character) -> str:
    """
    Packs a character, and all of its cliches, into a single record.

    Cliches are emitted sorted by their normalized name, so the same
    character always packs to the same string.

    Args:
        character (Character):
            The character to pack.

    Returns:
        str:
            The record, e.g. "Conan;Barbarian;mighty_thews:4:1:d6".

    """
    cliches = CLICHE_SEPARATOR.join(
        pack_cliche(cliche) for cliche in character.sorted_cliches()
    )
    return RECORD_SEPARATOR.join([character.name, character.desc, cliches])


def unpack_character(text: str) -> Character:
    """
    Unpacks a character record and creates a Character from it.

    Args:
        text (str):
            The record to unpack.

    Returns:
        Character:
            The new character, with all the cliches found in the record.
            When two cliches share a name, the last one wins.

    Raises:
        MalformedCharacterRecord:
            If the record does not have at least the name and description.
        MalformedClicheRecord:
            If one of the cliche records is malformed.

    """
    fields = text.split(RECORD_SEPARATOR)
    if len(fields) < 2:
        log_error(
            "Character record must have at least a name and a description",
            {"record": text},
        )
        raise MalformedCharacterRecord(text)

    if len(fields) > 3:
        log_warning(
            f"Character record has {len(fields)} fields, ignoring the extra ones",
            {"record": text},
        )

    character = Character(fields[0], fields[1])

    if len(fields) >= 3:
        for segment in fields[2].split(CLICHE_SEPARATOR):
            if not segment:
                continue
            character.add_existing_cliche(cliche_from_pack(segment))

    return character
