#!/usr/bin/env python3
"""
Setup script for the PDF Reviewer package.
"""

from setuptools import setup, find_packages

setup(
    name="pdf_reviewer",
    version="1.0.0",
    description="Pick a local PDF, then summarize it and generate a quiz from it with a chat-completion model",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests",
        "urllib3",
        "python-dotenv",
        "PyPDF2",
        "colorama",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-check",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf-reviewer=pdf_reviewer.cli:main",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
)
