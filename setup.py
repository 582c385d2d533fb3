#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from pathlib import Path

from setuptools import find_packages, setup

# XXX: the version is read without importing the package, its dependencies may not be installed yet
about: dict[str, str] = {}
exec((Path(__file__).parent / 'shared_types' / 'version.py').read_text(), about)

install_requires = [
    'colorama~=0.4.6',
    'configargparse~=1.7',
    'pydantic~=2.10',
    'pyyaml~=6.0',
    'structlog>=22.3',
    'typing_extensions>=4.12',
]

setup(
    name='shared-types',
    version=about['__version__'],
    description='Deterministic binary serialization (bincode and BCS) for statically shaped records',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    python_requires='>=3.11',
    entry_points={
        'console_scripts': ['shared-types=shared_types.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('tests', 'tests.*')),
    package_data={'shared_types.conf': ['*.yml']},
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.2'],
    },
)
