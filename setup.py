#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup


setup(
    name="ttyinput",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Keyboard input encoding and dispatch for terminal emulators",
    long_description="Turns logical key events into the escape sequences a controlling process expects, "
    "and lets on-screen menus intercept the keys they handle.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Terminals :: Terminal Emulators/X Terminals",
    ],
    keywords=["terminal", "tty", "escape sequences", "keyboard"],
    python_requires=">=3.10",
    install_requires=[
        "cattrs>=23.1",
        "msgspec>=0.18",
        "trio>=0.22.0",
    ],
    tests_require=["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "ttyinput-encode = ttyinput.scripts:main",
        ],
    },
)
