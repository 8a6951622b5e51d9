"""Build configuration for the sexpr package."""

from setuptools import setup

setup(
    name="sexpr",
    version="0.1.0",
    description="S-expression reader and canonical writer",
    python_requires=">=3.10",
    packages=["sexpr"],
    package_dir={"sexpr": "python/sexpr"},
    package_data={"sexpr": ["py.typed"]},
    extras_require={
        "test": ["pytest", "pytest-benchmark"],
    },
)
