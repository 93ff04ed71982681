# setup.py

from setuptools import setup, find_packages

setup(
    name="golden_staircase",
    version="0.1.0",
    description="Exact dynamic-programming solver for the Pharaoh's Golden Staircase merge problem",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "viz": ["pygame"],
        "test": ["pytest", "hypothesis", "pygame"],
    },
    entry_points={
        "console_scripts": [
            "golden-staircase=golden_staircase.cli:main",
        ],
    },
)
