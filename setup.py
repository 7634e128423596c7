"""Setup for mpd-ynca."""
from pathlib import Path

from setuptools import find_packages, setup

PROJECT_DIR = Path(__file__).parent.resolve()
README_FILE = PROJECT_DIR / "README.rst"
REQUIREMENTS_FILE = PROJECT_DIR / "requirements.txt"
PACKAGES = find_packages(exclude=["tests", "tests.*"])
PROJECT_REQ_PYTHON_VERSION = "3.11"

setup(
    name="mpd-ynca",
    version="0.1.0",
    license="GPL-2.0-or-later",
    description="Control a Yamaha AV receiver (YNCA) from the Music Player Daemon.",
    long_description=README_FILE.read_text(encoding="utf-8"),
    long_description_content_type="text/x-rst",
    packages=PACKAGES,
    zip_safe=True,
    platforms="any",
    install_requires=REQUIREMENTS_FILE.read_text(encoding="utf-8"),
    extras_require={"test": ["pytest", "pytest-asyncio"]},
    entry_points={"console_scripts": ["mpd-ynca = aioynca.__main__:main"]},
    python_requires=f">={PROJECT_REQ_PYTHON_VERSION}",
    classifiers=[
        "Intended Audience :: End Users/Desktop",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Sound/Audio :: Players",
    ],
)
