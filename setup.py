"""Build configuration for the sexp package."""

from setuptools import setup

setup(
    name="sexp",
    version="0.2.0",
    description="S-expression values with a reader and a canonical printer",
    python_requires=">=3.9",
    packages=["sexp"],
    package_dir={"sexp": "python/sexp"},
    package_data={"sexp": ["py.typed"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-cov", "pytest-benchmark"],
    },
    entry_points={"console_scripts": ["sexp-fmt=sexp.__main__:main"]},
)
