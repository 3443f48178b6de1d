#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name="PyGeo",
    version="0.1.0",
    description="Axis-aligned 2D bounding box primitive",
    author="PyGeo Team",
    packages=find_packages(exclude=["pygeo.test", "pygeo.test.*"]),
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[
        "numpy>=1.19.0",
        "coloredlogs",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: GIS",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
)
