"""
hwaddr/exceptions.py - Exceptions for hwaddr
"""

from enum import Enum


class EUIError(Enum):
    """
    Reason an EUI address string was rejected
    """
    INVALID_HEX_CHARACTER = 1
    INVALID_STRING_LENGTH = 2
    ODD_LENGTH = 3


class HWAddrException(Exception):
    pass


class HexDecodeError(HWAddrException, ValueError):
    pass


class InvalidHexCharacter(HexDecodeError):
    def __init__(self, char: str, index: int):
        super().__init__(f"Invalid character {char!r} at position {index}")
        self.char = char
        self.index = index

    def __reduce__(self):
        return (type(self), (self.char, self.index))


class OddLength(HexDecodeError):
    def __init__(self):
        super().__init__("Odd number of digits")

    def __reduce__(self):
        return (type(self), ())


class InvalidEUI(HWAddrException, ValueError):
    """
    Raised when a value cannot be converted to an EUI address.

    ``kind`` is the ``EUIError`` classification. For non-hex failures
    ``char`` and ``index`` locate the offending character in the string
    left after separators are removed.
    """

    def __init__(self, value, kind: EUIError, detail: str = "", char: str | None = None, index: int | None = None):
        message = f"'{value}' does not appear to be a valid EUI address"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.value = value
        self.kind = kind
        self.detail = detail
        self.char = char
        self.index = index

    def __reduce__(self):
        return (type(self), (self.value, self.kind, self.detail, self.char, self.index))
