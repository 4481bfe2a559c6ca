#! /usr/bin/env python3

import os
import sys

from setuptools import setup

this_dir = os.path.dirname(os.path.abspath(__file__))

if sys.version_info < (3, 8, 0):
    print("ERROR: Mirrorfold requires Python >= 3.8.0")
    sys.exit(1)

import importlib.util
import importlib.machinery

spec = importlib.machinery.PathFinder().find_spec(
    "mirrorfold", [os.path.join(this_dir, "lib")])
mirrorfold = importlib.util.module_from_spec(spec)
spec.loader.exec_module(mirrorfold)

VERSION = mirrorfold.VERSION

NAME = "mirrorfold"

DESC = "Starting positions for the Mirrorfold Classic chess variant"

LONG_DESC = """Mirrorfold Classic is a 6x6 chess variant. White's back rank is one of
the 360 unique orderings of {K, R, N, B, P, P}, chosen by a position number,
and black's back rank is its mirror image: reversed and in lower case.

This package enumerates the orderings in a fixed sorted order and turns a
position number into the FEN of the starting position, e.g.

    pprnbk/6/6/6/6/KRNBPP w - - 0 1
"""

CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Topic :: Games/Entertainment :: Board Games",
]

PACKAGES = [
    "mirrorfold",
    "mirrorfold.System",
    "mirrorfold.Utils",
    "mirrorfold.Variants",
]

setup(
    name=NAME,
    version=VERSION,
    classifiers=CLASSIFIERS,
    keywords="python chess variant fen mirrorfold",
    description=DESC,
    long_description=LONG_DESC,
    license="GPL3",
    python_requires=">=3.8",
    install_requires=[],
    package_dir={"": "lib"},
    packages=PACKAGES,
)
