#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pyh2on2',
    include_package_data=True,
    version='1.0.0',
    packages=find_packages(),
    description='pyh2on2 - Water / Nitrogen two-phase fluid system properties',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Mark W. Burgoyne',
    author_email='mark.w.burgoyne@gmail.com',
    keywords=['h2o', 'n2', 'fluid properties', 'reservoir', 'simulation'],
    classifiers=[],
    install_requires=[
        'numpy',
        'scipy',
        'pandas',
        'tabulate',
        'jax',
        'setuptools'
    ],
    extras_require={
        'test': ['pytest'],
    },
)
