"""
hwaddr/hexcodec.py - Hex string decoding
"""

import binascii

from hwaddr.exceptions import InvalidHexCharacter, OddLength


HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_hex(s: str) -> bytes:
    """
    Decode a string of hex digits.

    Characters are checked left to right and the first one that is not a
    hex digit raises ``InvalidHexCharacter``. Only once every character is
    known to be valid is an odd digit count reported with ``OddLength``.
    """
    for index, char in enumerate(s):
        if char not in HEX_DIGITS:
            raise InvalidHexCharacter(char, index)

    if len(s) % 2:
        raise OddLength()

    return binascii.unhexlify(s)
