"""
Pytest config
"""

import pytest

from hwaddr.eui import EUI


def pytest_configure(config):
    if config.option.logdebug:
        config.option.log_cli_level = "DEBUG"


def pytest_addoption(parser):
    parser.addoption("--logdebug", action="store_true", help="Enable debug logging")


@pytest.fixture
def eui48_bytes():
    return bytes([0x0A, 0x1B, 0x2C, 0x3D, 0x4E, 0x5F])


@pytest.fixture
def eui64_bytes():
    return bytes([0x00, 0xFF, 0x0A, 0x1B, 0x2C, 0x3D, 0x4E, 0x5F])


def pytest_assertrepr_compare(op, left, right):
    """
    Show the first differing octet when two addresses of the same type
    compare unequal.
    """
    if op != "==" or not isinstance(left, EUI) or type(left) is not type(right):
        return None

    diff_index = next(
        (i for i in range(len(left)) if left.data[i] != right.data[i]),
        None,
    )
    if diff_index is None:
        return None

    return [
        f"{left!r} == {right!r}",
        f"At octet {diff_index} diff: {left.data[diff_index]:02X} != {right.data[diff_index]:02X}",
    ]
