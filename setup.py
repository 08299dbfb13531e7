#!/usr/bin/env python3
"""
semaphurl - Rule-based URL router for desktop browsers
"""

from setuptools import setup, find_packages

# Read version from semaphurl/__version__.py
exec(open("semaphurl/__version__.py").read())

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="semaphurl-browser-router",
    version=__version__,
    author="SemaphURL contributors",
    description="Route every link you click to the right browser using pattern rules",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["semaphurl", "semaphurl.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Win32 (MS Windows)",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP :: Browsers",
        "Topic :: Utilities",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "semaphurl=semaphurl.cli:main",
        ],
    },
    install_requires=[
        "regex>=2022.1.18",  # regex matching with a timeout
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black",
            "flake8",
        ],
    },
    keywords="browser, url, router, rules, default browser, chrome, firefox",
)
