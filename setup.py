from setuptools import setup, find_packages

from hwaddr import VERSION

setup(
    name="hwaddr",
    description="EUI-48 and EUI-64 hardware address parsing and formatting",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest",
        ],
    },
    version=VERSION,
)
