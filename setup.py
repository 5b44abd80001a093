#!/usr/bin/env python
# -*- coding: utf-8 -*-
# pylint: disable=C0111,W6005,W6100


import os
import re

from setuptools import setup


def get_version(*file_paths):
    """
    Extract the version string from the file at the given relative path fragments.
    """
    filename = os.path.join(os.path.dirname(__file__), *file_paths)
    version_file = open(filename).read()
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


def get_requirements(requirements_file):
    """
    Get the contents of a file listing the requirements
    """
    lines = open(requirements_file).readlines()
    dependencies = []

    for line in lines:
        # Ignore comment lines and any trailing comment
        package, __, __ = line.partition("#")
        # Remove any whitespace and assume non-empty results are dependencies
        package = package.strip()

        if package:
            dependencies.append(package)
    return dependencies


VERSION = get_version("logstore_xapi", "__init__.py")

base_path = os.path.dirname(__file__)

README = open(os.path.join(base_path, "README.rst")).read()
CHANGELOG = open(os.path.join(base_path, "CHANGELOG.rst")).read()
REQUIREMENTS = get_requirements(os.path.join(base_path, 'requirements', 'base.in'))
TEST_REQUIREMENTS = get_requirements(os.path.join(base_path, 'requirements', 'test.in'))

setup(
    name="logstore-xapi",
    version=VERSION,
    description="""Turns platform event verbs into xAPI verbs for delivery to a Learning Record Store""",
    long_description=README + "\n\n" + CHANGELOG,
    author="Logstore xAPI contributors",
    packages=[
        "logstore_xapi",
        "logstore_xapi.settings",
        "logstore_xapi.transformer",
    ],
    include_package_data=True,
    install_requires=REQUIREMENTS,
    extras_require={
        "test": TEST_REQUIREMENTS,
    },
    license="AGPL 3.0",
    zip_safe=False,
    keywords="Django xAPI LRS",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Framework :: Django",
        "Framework :: Django :: 3.2",
        "Framework :: Django :: 4.2",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.11",
    ],
)
