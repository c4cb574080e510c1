#!/usr/bin/env python
# -*- coding: utf-8 -*-

import setuptools


setuptools.setup(
    name='cyclovander',
    version='0.1.0',
    description="Trace of H_n and condition number of cyclotomic Vandermonde matrices",
    packages=setuptools.find_packages(exclude=['tests']),
    package_dir={
        'cyclovander': 'cyclovander',
    },
    install_requires=[
        'click',
        'pandas',
        'scipy',
        'numpy',
        'sympy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'cyclovander=cyclovander.cli:main',
        ]
    },
    classifiers=[
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
)
