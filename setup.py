"""
setup.py

Packaging metadata and CLI entry point for the Velo-Altitude content audit.

Version: 1.0.0: content quality audit (completeness, critical data,
duplicates, slug coherence, cross references) with a Markdown report,
a click CLI and a read-only FastAPI service.
"""
from setuptools import setup, find_packages

setup(
    name="velo-content-audit",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
        "fastapi",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "velo-content=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
