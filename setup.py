#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="kbdsim",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="kbdgen keyboard layouts as an interactive, typeable layer model",
    long_description="Transforms kbdgen keyboard definitions into rows of keys with per-layer outputs, "
    "and simulates typing on them: modifiers, click-latched modifiers, caps lock and deadkeys.",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Text Processing :: Linguistic",
    ],
    keywords=["keyboard", "kbdgen", "deadkeys"],
    python_requires=">=3.11",
    install_requires=[
        "attrs",
        "cattrs",
        "msgspec",
        "pygtrie>=2.4.2",
        "PyYAML",
        "trio>=0.20.0",
        "trio-util>=0.7.0",
    ],
    tests_require=["pytest>=6.2.4", "pytest-trio"],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio"],
    },
    entry_points={
        "console_scripts": [
            "kbdsim-show = kbdsim.scripts:show_layout_cli",
            "kbdsim-type = kbdsim.scripts:type_keys_cli",
        ],
    },
)
