"""
Setup script for the jobboard project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

from version import __version__

setup(
    name="jobboard",
    version=__version__,
    packages=find_packages(include=["jobboard", "jobboard.*", "jobs_api", "jobs_api.*"]),
    py_modules=["version"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "pydantic-settings>=2",
        "pymongo",
        "python-dotenv",
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-mock",
            "httpx",
        ],
    },
)
