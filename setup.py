#!/usr/bin/env python

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from codecs import open
from setuptools import setup, find_packages

try:
    from cfext_willitconnect._version import __version__
except ImportError:
    __version__ = "1.1.0"

VERSION = __version__

CLASSIFIERS = [
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Intended Audience :: System Administrators',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Programming Language :: Python :: 3.13',
    'License :: OSI Approved :: MIT License',
]

# knack hosts the command; requests talks to the CF API and the willitconnect service
DEPENDENCIES = [
    'knack',
    'requests',
]

TEST_DEPENDENCIES = [
    'pytest',
]

with open('README.md', 'r', encoding='utf-8') as f:
    README = f.read()
with open('HISTORY.rst', 'r', encoding='utf-8') as f:
    HISTORY = f.read()

setup(
    name='cf-willitconnect',
    version=VERSION,
    description='Command-line extension that validates connectivity between Cloud Foundry and a target',
    long_description=README + '\n\n' + HISTORY,
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=CLASSIFIERS,
    python_requires='>=3.10',
    packages=find_packages(exclude=['*.tests', '*.tests.*']),
    install_requires=DEPENDENCIES,
    extras_require={'test': TEST_DEPENDENCIES},
    entry_points={
        'console_scripts': [
            'cf-willitconnect = cfext_willitconnect.__main__:main',
        ],
    },
)
