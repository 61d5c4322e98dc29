"""
Constants and enumerations for the Risus package.

Defines the funky dice, the delimiters of the packed text format, and the
global display verbosity.
"""

from enum import Enum

# Global verbose level for character sheets:
# 0 - Minimal (only the cliche list)
# 1 - Moderate (also show the dice of every cliche)
# 2 - Full detail (also show the packed record)
GLOBAL_VERBOSE_LEVEL = 0

# Delimiters of the packed text format. They are reserved and never escaped.
RECORD_SEPARATOR = ";"
CLICHE_SEPARATOR = "|"
CLICHE_FIELD_SEPARATOR = ":"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class FunkyDie(NiceEnum):
    """Defines the die types a cliche can be rolled with."""

    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D30 = "d30"

    @property
    def sides(self) -> int:
        """Returns the number of sides of this die."""
        return int(self.value[1:])

    @property
    def color(self) -> str:
        """Returns the color string associated with this die."""
        return {
            FunkyDie.D6: "white",
            FunkyDie.D8: "bold green",
            FunkyDie.D10: "bold cyan",
            FunkyDie.D12: "bold blue",
            FunkyDie.D20: "bold magenta",
            FunkyDie.D30: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies die color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    @staticmethod
    def from_tag(tag: str) -> "FunkyDie | None":
        """
        Looks up the die matching a tag such as "d8".

        Args:
            tag (str): The die tag, case-insensitive.

        Returns:
            FunkyDie | None: The matching die, or None for unknown tags.

        """
        try:
            return FunkyDie(tag.strip().lower())
        except ValueError:
            return None


DEFAULT_FUNKY_DIE = FunkyDie.D6
