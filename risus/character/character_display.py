"""
Character display module for the Risus package.

Provides the plain-text summary of a character and a colored character
sheet printed through rich.
"""

from typing import Any

from rich.markup import escape

from risus.core import constants
from risus.core.constants import FunkyDie
from risus.core.utils import cprint, crule


class CharacterDisplay:
    """
    Handles display and formatting for Character objects.

    Attributes:
        owner (Any):
            The Character instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        """
        Initialize the CharacterDisplay with its owner.

        Args:
            owner (Any):
                The Character instance that this display is associated with.

        """
        self.owner = owner

    def summary(self) -> str:
        """
        Get the plain-text summary of the character.

        The name comes first, then the description and the cliches on their
        own lines, each only when present. For example:

            Conan
            Barbarian
            Cliches: Mighty Thews[4], Sorcery(2d10)

        Returns:
            str: The summary.

        """
        text = f"{self.owner.name}"
        if self.owner.desc:
            text += f"\n{self.owner.desc}"
        cliches = [str(cliche) for cliche in self.owner.sorted_cliches()]
        if cliches:
            text += "\nCliches: " + ", ".join(cliches)
        return text

    def cliche_lines(self) -> list[str]:
        """
        Get one rich-markup line per cliche, sorted by name.

        Returns:
            list[str]: The formatted lines.

        """
        lines = []
        for cliche in self.owner.sorted_cliches():
            name = cliche.display_name
            if cliche.is_double:
                name = f"[bold yellow]{name}[/] [dim](double)[/]"
            if constants.GLOBAL_VERBOSE_LEVEL >= 1:
                dice = cliche.dice_string
            else:
                dice = str(cliche.value) + (cliche.funky if cliche.is_funky else "")
            die = FunkyDie.from_tag(cliche.funky)
            if cliche.is_funky:
                dice = die.colorize(dice) if die else f"[italic]{dice}[/]"
            lines.append(f"{name}: {dice}")
        return lines

    def print_sheet(self) -> None:
        """Prints the character sheet to the console."""
        crule(f"[bold]{escape(self.owner.name)}[/]", style="bold green")
        if self.owner.desc:
            cprint(f"  [italic]{escape(self.owner.desc)}[/]")
        lines = self.cliche_lines()
        if not lines:
            cprint("  [dim]No cliches.[/]")
        for line in lines:
            cprint(f"  {line}")
        if constants.GLOBAL_VERBOSE_LEVEL >= 2:
            cprint(f"  [dim]Packed: {escape(self.owner.pack())}[/]")
