"""
Cliche module for the Risus package.

Defines the Cliche class, the most important part of a Risus character: a
named trait rated by a number of dice.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from risus.core.constants import DEFAULT_FUNKY_DIE, FunkyDie
from risus.core.naming import humanize_name, symbolize_name


def normalize_funky(funky: FunkyDie | str | None) -> str:
    """
    Turns a die given as enum, tag or nothing into the stored tag text.

    Unknown tags are kept verbatim.

    Args:
        funky (FunkyDie | str | None): The die to normalize.

    Returns:
        str: The die tag, "d6" when no die was given.

    """
    if isinstance(funky, FunkyDie):
        return funky.value
    if not funky:
        return DEFAULT_FUNKY_DIE.value
    return funky


class Cliche(BaseModel):
    """
    A named trait of a Risus character.

    The name is always stored in its normalized form, so cliches whose human
    names differ only in case or spacing share the same key. The die is
    always stored as its tag, also when assigned after creation.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(
        description="The normalized name of the cliche.",
    )
    value: int = Field(
        default=1,
        description="How many dice the cliche rolls.",
    )
    is_double: bool = Field(
        default=False,
        description="Whether the cliche can be double pumped.",
    )
    funky: str = Field(
        default=DEFAULT_FUNKY_DIE.value,
        description="The die tag the cliche rolls with, d6 when not given.",
    )

    @field_validator("name", mode="before")
    @classmethod
    def _symbolize_name(cls, name: Any) -> Any:
        """Normalizes the name before it is stored."""
        return symbolize_name(name) if isinstance(name, str) else name

    @field_validator("funky", mode="before")
    @classmethod
    def _normalize_funky(cls, funky: Any) -> Any:
        """Stores the die as its tag, d6 when not given."""
        if funky is None or isinstance(funky, (FunkyDie, str)):
            return normalize_funky(funky)
        return funky

    @property
    def display_name(self) -> str:
        """Returns the human readable name of the cliche."""
        return humanize_name(self.name)

    @property
    def is_funky(self) -> bool:
        """Returns True when the cliche does not roll the standard d6."""
        return self.funky != DEFAULT_FUNKY_DIE.value

    @property
    def is_known_die(self) -> bool:
        """Returns True when the die tag is one of the FunkyDie members."""
        return FunkyDie.from_tag(self.funky) is not None

    @property
    def dice_string(self) -> str:
        """Returns the dice of the cliche, e.g. "4d6"."""
        return f"{self.value}{self.funky}"

    def update(self, value: int, funky: FunkyDie | str | None = None) -> None:
        """
        Updates the value and the die of the cliche.

        Args:
            value (int): The new number of dice.
            funky (FunkyDie | str | None): The new die, d6 when omitted.

        """
        self.value = value
        self.funky = funky

    def pack(self) -> str:
        """Packs the cliche into a single record."""
        from risus.character.character_serialization import pack_cliche

        return pack_cliche(self)

    @staticmethod
    def unpack(text: str) -> tuple[str, int, bool, str]:
        """Unpacks a record into its (name, value, is_double, funky) fields."""
        from risus.character.character_serialization import unpack_cliche

        return unpack_cliche(text)

    @staticmethod
    def from_pack(text: str) -> "Cliche":
        """Creates a new cliche from a packed record."""
        from risus.character.character_serialization import cliche_from_pack

        return cliche_from_pack(text)

    def __str__(self) -> str:
        value = str(self.value)
        if self.is_funky:
            value += self.funky
        if self.is_double:
            return f"{self.display_name}[{value}]"
        return f"{self.display_name}({value})"
