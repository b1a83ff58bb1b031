# -*- coding: utf-8 -*-

from os import path
from io import open
from setuptools import find_packages, setup

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="matrix-botkit",
    version="0.1.0",
    description=("Matrix bot helpers: typed events, rich replies and group "
                 "management on top of an async client."),
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="ISC",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "aiohttp<3.14",
        "jsonschema",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "aioresponses",
        ]
    },
    zip_safe=False
)
