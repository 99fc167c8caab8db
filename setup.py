#!/usr/bin/env python
# -*- encoding: utf-8 -*-

"""Setup Module for Aspects"""

import io
import re
from glob import glob
from os.path import basename, dirname, join, splitext

from setuptools import find_packages, setup


def read(*names, **kwargs):
    """Helper method to read files"""
    return io.open(
        join(dirname(__file__), *names),
        encoding=kwargs.get("encoding", "utf8"),
    ).read()


install_requires = [
    "bleach>=4.1.0",
    "inflection>=0.5.1",
    "python-dateutil>=2.8.2",
]

testing_requires = [
    "mock>=5.1.0",
    "pytest-cov>=4.1.0",
    "pytest-mock>=3.12.0",
    "pytest>=7.4.3",
]

types_requires = [
    "types-bleach>=6.0.0",
    "types-mock>=0.1.3",
    "types-python-dateutil>=0.1.6",
]

dev_requires = (
    types_requires
    + testing_requires
    + [
        "black>=23.11.0",
        "coverage>=7.3.2",
        "nox>=2023.4.22",
    ]
)

setup(
    name="aspects",
    version="0.1.0",
    license="BSD 3-Clause License",
    description="Entities with identity, validated fields and a Person model",
    long_description="%s\n%s"
    % (
        read("README.rst"),
        re.sub(":[a-z]+:`~?(.*?)`", r"``\1``", read("CHANGELOG.rst")),
    ),
    long_description_content_type="text/x-rst",
    packages=find_packages("src"),
    package_dir={"": "src"},
    py_modules=[splitext(basename(path))[0] for path in glob("src/*.py")],
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: Libraries",
    ],
    keywords=["entity", "domain model", "validation"],
    install_requires=install_requires,
    extras_require={
        "test": testing_requires,
        "tests": testing_requires,
        "testing": testing_requires,
        "dev": dev_requires,
        "all": dev_requires,
    },
)
