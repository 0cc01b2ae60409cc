"""
hwaddr -- EUI-48 and EUI-64 hardware addresses
"""

from hwaddr.eui import EUI, EUI48, EUI64, parse_eui
from hwaddr.exceptions import EUIError, HWAddrException, InvalidEUI

VERSION = "0.1.0"

__all__ = [
    "EUI",
    "EUI48",
    "EUI64",
    "EUIError",
    "HWAddrException",
    "InvalidEUI",
    "parse_eui",
]
