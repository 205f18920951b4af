#!/usr/bin/env python

from setuptools import setup

setup(
    name="podxcconfig",
    version="0.1.0",
    packages=[
        "podxcconfig",
        "podxcconfig.details",
        "podxcconfig.details.tools",
        "podxcconfig.generators",
        "podxcconfig.generators.xcconfig",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["podxcconfig = podxcconfig.__main__:main"]},
)
