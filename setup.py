import re
from pathlib import Path

from setuptools import find_packages, setup

ABOUT = Path(__file__).parent / "src" / "axemessage" / "__about__.py"
VERSION = re.search(r'^__version__ = "([^"]+)"', ABOUT.read_text(), re.M).group(1)

if __name__ == "__main__":
    setup(
        name="axemessage",
        version=VERSION,
        description="Axe signed-message signing and verification with public key recovery",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[
            "base58>=2.1",
            "ecdsa>=0.18",
            "pycryptodome>=3.15",
            "PyYAML>=6.0",
        ],
        extras_require={
            "test": ["pytest>=7"],
        },
    )
