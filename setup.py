"""Setup configuration for cvd-risk-scores package."""
from setuptools import setup, find_packages

setup(
    name="cvd-risk-scores",
    version="0.1.0",
    description="Vectorized cardiovascular risk scores (ESC SCORE/SCORE2, ASCVD, Framingham, PROCAM, REACH, TRA2P, INVEST)",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    package_dir={"": "."},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21",
        "pandas>=1.3",
    ],
    extras_require={
        "test": ["pytest>=7.0", "scipy>=1.7"],
    },
)
