import re
from pathlib import Path

from setuptools import setup

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

path = Path(__file__).parent / "gangway" / "__init__.py"
version = re.search(r"\d[.]\d[.]\d", path.read_text()).group(0)  # type: ignore

packages = [
    "gangway",
    "gangway.impl",
    "gangway.impl.models",
]


setup(
    name="gangway",
    author="SawshaDev",
    version=version,
    packages=packages,
    license="MIT",
    description="A minimal discord webhook client that builds and posts messages with embeds",
    install_requires=requirements,
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    python_requires=">=3.8.0",
)
