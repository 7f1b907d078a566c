#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="viewdock",
    version="0.1.0",
    description="Recursive split layout engine for panel docking",
    license="ISC",
    packages=find_packages(include=["viewdock", "viewdock.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PyPubSub>=4.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: User Interfaces",
    ],
)
