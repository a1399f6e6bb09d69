#!/usr/bin/env python3
"""Setup script for Catalan Morphology."""

from setuptools import setup, find_packages

setup(
    name="catalan-morphology",
    version="1.0.0",
    description="Base form reconstruction for Catalan verbs, nouns and adjectives",
    author="Catalan Morphology Team",
    python_requires=">=3.9",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
    ],
)
