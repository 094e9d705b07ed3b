"""
Setup script for feedback_cascade package.

Installation:
    pip install -e .
"""

from setuptools import setup, find_packages

setup(
    name="feedback_cascade",
    version="0.1.0",
    description="Relativistic feedback avalanche Monte Carlo for thundercloud gamma-ray studies",
    packages=find_packages(include=["feedback_cascade", "feedback_cascade.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "numba>=0.58",
        "pyyaml>=6.0",
        "tqdm>=4.65",
    ],
    extras_require={
        "dev": ["pytest>=7.3", "black>=23.0", "mypy>=1.3", "ipython>=8.12"],
    },
)
