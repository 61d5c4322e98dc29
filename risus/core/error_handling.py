"""
Exceptions raised by the Risus package.

Every error the package raises derives from RisusError. Format errors also
derive from ValueError, so callers that only care about bad input can catch
that instead.
"""


class RisusError(Exception):
    """Generic Risus error."""


class FormatError(RisusError, ValueError):
    """
    Raised when a packed record cannot be unpacked.

    Attributes:
        text (str):
            The record that failed to unpack.

    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class MalformedCharacterRecord(FormatError):
    """Raised when a character record has fewer than two fields."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Error unpacking character: {text}", text)


class MalformedClicheRecord(FormatError):
    """Raised when a cliche record does not split into its four fields."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Trouble unpacking cliche: {text}", text)
