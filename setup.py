"""Setup script for rand64-py package."""

from setuptools import setup, find_packages

setup(
    name="rand64-py",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=['setuptools_scm'],
    packages=find_packages(include=["generators", "iorand", "randutil"]),
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
)
