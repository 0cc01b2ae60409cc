"""
hwaddr/eui.py - EUI hardware address objects
"""

import binascii
from collections.abc import Iterable
import logging

from hwaddr.exceptions import (
    EUIError,
    InvalidEUI,
    InvalidHexCharacter,
    OddLength,
)
from hwaddr.hexcodec import decode_hex


logger = logging.getLogger("eui")


def _decode(value) -> bytes:
    """
    Strip separators from an address string and decode the hex digits.

    Raises ``InvalidEUI`` for non-hex characters and odd digit counts.
    The length of the result is left to the caller.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")

    digits = value.translate(EUI.SEPARATOR_TABLE)

    try:
        return decode_hex(digits)
    except InvalidHexCharacter as e:
        raise InvalidEUI(value, EUIError.INVALID_HEX_CHARACTER, str(e), char=e.char, index=e.index) from e
    except OddLength as e:
        raise InvalidEUI(value, EUIError.ODD_LENGTH, str(e)) from e


class EUI:
    """
    Base for fixed-length EUI hardware addresses.

    Subclasses set ``LENGTH`` to their byte count. Formatting and parsing
    are shared and depend only on that constant.
    """

    LENGTH: int = 0
    SEPARATORS = ".:-"
    SEPARATOR_TABLE = str.maketrans("", "", SEPARATORS)

    __slots__ = ("_data",)

    def __init__(self, address: str | bytes):
        self._check_concrete()

        if isinstance(address, str):
            data = self.from_string(address).data
        elif isinstance(address, Iterable):
            data = address if type(address) is bytes else bytes(address)
            if len(data) != self.LENGTH:
                raise InvalidEUI(
                    data,
                    EUIError.INVALID_STRING_LENGTH,
                    f"expected {self.LENGTH} bytes, got {len(data)}",
                )
        else:
            raise TypeError(f"expected str or bytes, got {type(address).__name__}")
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._data,))

    @classmethod
    def _check_concrete(cls):
        if not cls.LENGTH:
            raise TypeError(f"{cls.__name__} has no fixed length; use EUI48 or EUI64")

    @classmethod
    def from_string(cls, value: str):
        """
        Parse an address in canonical, colon or dot notation.

        Separators are removed wherever they appear, so ``0a1b2c3d4e5f``
        and ``0A:1B-2C.3D::4E5F`` are accepted too. Raises ``InvalidEUI``
        on failure.
        """
        cls._check_concrete()

        try:
            data = _decode(value)
            if len(data) != cls.LENGTH:
                raise InvalidEUI(
                    value,
                    EUIError.INVALID_STRING_LENGTH,
                    f"expected {cls.LENGTH} bytes, got {len(data)}",
                )
        except InvalidEUI as e:
            logger.debug("Rejected %s: %s", cls.__name__, e)
            raise

        return cls(data)

    @classmethod
    def try_from_string(cls, value: str):
        """
        Like ``from_string`` but returns the ``EUIError`` instead of raising
        """
        cls._check_concrete()

        try:
            data = _decode(value)
        except InvalidEUI as e:
            return e.kind

        if len(data) != cls.LENGTH:
            return EUIError.INVALID_STRING_LENGTH

        return cls(data)

    @property
    def data(self) -> bytes:
        return self._data

    def to_bytes(self) -> bytes:
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def _hex(self) -> str:
        return binascii.hexlify(self._data).decode().upper()

    def _octets(self) -> list[str]:
        s = self._hex()
        return [s[i:i+2] for i in range(0, len(s), 2)]

    def to_canonical(self) -> str:
        return "-".join(self._octets())

    def to_colon(self) -> str:
        return ":".join(self._octets())

    def to_dot(self) -> str:
        s = self._hex()
        return ".".join(s[i:i+4] for i in range(0, len(s), 4))

    @property
    def bits(self) -> int:
        return self.LENGTH * 8

    def __str__(self) -> str:
        return self.to_canonical()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.to_canonical()}')"

    def __len__(self) -> int:
        return self.LENGTH

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash((type(self).__name__, self._data))


class EUI48(EUI):
    """
    EUI-48 address, including MAC-48
    """
    LENGTH = 6
    __slots__ = ()


class EUI64(EUI):
    """
    EUI-64 address
    """
    LENGTH = 8
    __slots__ = ()


def parse_eui(value: str) -> EUI:
    """
    Parse a string as whichever of EUI-48 or EUI-64 its length matches
    """
    try:
        data = _decode(value)
        for cls in (EUI48, EUI64):
            if len(data) == cls.LENGTH:
                return cls(data)
        raise InvalidEUI(
            value,
            EUIError.INVALID_STRING_LENGTH,
            f"expected {EUI48.LENGTH} or {EUI64.LENGTH} bytes, got {len(data)}",
        )
    except InvalidEUI as e:
        logger.debug("Rejected EUI: %s", e)
        raise
