#!/usr/bin/env python3
"""Setup script for masterstat."""

from setuptools import setup, find_packages
import os

# Read README file
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read version from __init__.py
def get_version():
    version_file = os.path.join("masterstat", "__init__.py")
    with open(version_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split('"')[1]
    return "0.1.0"

setup(
    name="masterstat",
    version=get_version(),
    author="masterstat Contributors",
    author_email="",
    description="Get server addresses from QuakeWorld master servers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/quakeworld/masterstat",
    packages=find_packages(include=["masterstat", "masterstat.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Networking",
    ],
    python_requires=">=3.8",
    install_requires=[
        # No external dependencies - uses only standard library
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-asyncio>=0.21",
            "pytest-cov",
            "flake8",
            "black",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "masterstat=masterstat.cli:main",
        ],
    },
    include_package_data=True,
    package_data={
        "masterstat": ["py.typed"],
    },
    project_urls={
        "Bug Reports": "https://github.com/quakeworld/masterstat/issues",
        "Source": "https://github.com/quakeworld/masterstat",
    },
    keywords="quake quakeworld master server list udp",
    zip_safe=False,
)
