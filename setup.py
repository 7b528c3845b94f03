#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_readme():
    """Read README.md for long description."""
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    try:
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return "Split Monitor - reset and success chance tracking for timed runs"

__version__ = "1.0.0"

setup(
    name="split-monitor",
    version=__version__,
    description="Reset and success chance calculation and display for speedrun timers",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages("src", exclude=["tests", "tests.*"]),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Games/Entertainment",
    ],
    keywords=["speedrun", "timer", "splits", "reset chance", "rich"],
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "rich>=13.0",
    ],
    extras_require={
        "sentry": [
            "sentry-sdk>=2.0",
        ],
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "flake8>=3.8",
            "setuptools>=45.0",
            "wheel>=0.36",
        ],
        "test": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    license="MIT",
    platforms=["any"],
)
