"""
Setup script for PDF Text.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="pdf-text",
    version="1.0.0",
    description="Password-aware PDF metadata inspection and page text extraction",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="PDF Text Contributors",
    author_email="",
    packages=find_packages(include=["pdf_text", "pdf_text.*"]),
    install_requires=[
        "pypdf[crypto]>=4.0.0",
        "click>=8.0.0",
        "rich>=13.0.0",
        "fastapi>=0.100.0",
    ],
    extras_require={
        "server": [
            "uvicorn>=0.23.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf-text=pdf_text.cli:cli",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Text Processing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf text extract metadata password pages",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
