"""
Character management module for the Risus package.

Defines the Character class, holding the name, the description and the
cliches of a Risus character, together with the operations to add, update
and remove cliches and to pack the character into text.
"""

from risus.core.constants import FunkyDie
from risus.core.naming import symbolize_name

from .character_display import CharacterDisplay
from .cliche import Cliche


class Character:
    """
    Represents a Risus character.

    Attributes:
        name (str):
            The name of the character, as written by the player.
        desc (str):
            A free-form description of the character.
        cliches (dict[str, Cliche]):
            The cliches of the character, keyed by their normalized name.
        display (CharacterDisplay):
            The display module of the character.

    """

    name: str
    desc: str
    cliches: dict[str, Cliche]
    display: CharacterDisplay

    def __init__(self, name: str, desc: str = "") -> None:
        self.name = name
        self.desc = desc
        self.cliches = {}
        self.display = CharacterDisplay(owner=self)

    # ============================================================================
    # CLICHE MANAGEMENT
    # ============================================================================

    def add_cliche(
        self,
        name: str,
        value: int = 1,
        is_double: bool = False,
        funky: FunkyDie | str | None = None,
    ) -> "Character":
        """
        Creates a new cliche and adds it to the character.

        A cliche with the same normalized name is replaced.

        Args:
            name (str): The name of the cliche.
            value (int): How many dice the cliche rolls.
            is_double (bool): Whether the cliche can be double pumped.
            funky (FunkyDie | str | None): The die of the cliche, d6 if None.

        Returns:
            Character: The character itself, to allow chaining.

        """
        cliche = Cliche(name=name, value=value, is_double=is_double, funky=funky)
        return self.add_existing_cliche(cliche)

    def add_existing_cliche(self, cliche: Cliche) -> "Character":
        """
        Adds an already created cliche to the character.

        A cliche with the same normalized name is replaced.

        Args:
            cliche (Cliche): The cliche to add.

        Returns:
            Character: The character itself, to allow chaining.

        """
        self.cliches[cliche.name] = cliche
        return self

    def get_cliche(self, name: str) -> Cliche | None:
        """Returns the cliche with the given name, or None."""
        return self.cliches.get(symbolize_name(name))

    def update_cliche(
        self, name: str, value: int, funky: FunkyDie | str | None = None
    ) -> "Character":
        """
        Updates the value and the die of a cliche.

        Nothing happens if the character has no such cliche.

        Args:
            name (str): The name of the cliche.
            value (int): The new number of dice.
            funky (FunkyDie | str | None): The new die, d6 if None.

        Returns:
            Character: The character itself, to allow chaining.

        """
        cliche = self.get_cliche(name)
        if cliche is not None:
            cliche.update(value, funky)
        return self

    def remove_cliche(self, name: str) -> Cliche | None:
        """
        Removes a cliche from the character.

        Args:
            name (str): The name of the cliche.

        Returns:
            Cliche | None: The removed cliche, or None if it was not found.

        """
        return self.cliches.pop(symbolize_name(name), None)

    def sorted_cliches(self) -> list[Cliche]:
        """Returns the cliches sorted by their normalized name."""
        return [self.cliches[key] for key in sorted(self.cliches)]

    # ============================================================================
    # PACKING
    # ============================================================================

    def pack(self) -> str:
        """Packs the character into a single record."""
        from .character_serialization import pack_character

        return pack_character(self)

    @staticmethod
    def unpack(text: str) -> "Character":
        """Creates a character from a packed record."""
        from .character_serialization import unpack_character

        return unpack_character(text)

    # ============================================================================
    # DUNDER METHODS
    # ============================================================================

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and symbolize_name(name) in self.cliches

    def __len__(self) -> int:
        return len(self.cliches)

    def __str__(self) -> str:
        return self.display.summary()

    def __repr__(self) -> str:
        return f"Character(name={self.name!r}, desc={self.desc!r}, cliches={len(self)})"
