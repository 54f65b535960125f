#!/usr/bin/env python3
# encoding: utf-8
"""
setup.py

Copyright (c) 2026 mrtparser contributors. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

import os

import setuptools


def filesOf(directory):
    files = []
    for l, d, fs in os.walk(directory):
        if not d:
            for f in fs:
                files.append(os.path.join(l, f))
    return files


data_files = [
    ('etc/mrtparser', filesOf('etc/mrtparser')),
]

setuptools.setup(
    name='mrtparser',
    version='0.1.0',
    description='decoder for MRT (RFC 6396) table dump v2 routing archives',
    license='BSD-3-Clause',
    python_requires='>=3.12',
    package_dir={'': 'src'},
    packages=setuptools.find_packages(where='src', include=['mrtparser', 'mrtparser.*']),
    data_files=data_files,
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    entry_points={
        'console_scripts': [
            'mrtparser = mrtparser.application.main:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'Intended Audience :: Telecommunications Industry',
        'License :: OSI Approved :: BSD License',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
        'Topic :: Internet',
        'Topic :: System :: Networking',
    ],
)
