"""Setup configuration for quant-cloud-init package.

This module configures the package for distribution, including dependencies,
entry points, and metadata. It reads requirements from requirements.txt if available,
otherwise uses a default set of requirements.

Example:
    To install the package:
        $ pip install .

    To install with test dependencies:
        $ pip install ".[test]"

Attributes:
    requirements_file (Path): Path to requirements.txt file
    requirements (list): List of package dependencies
"""

from pathlib import Path
from setuptools import setup, find_packages

requirements_file = Path("requirements.txt")
if requirements_file.exists():
    with open(requirements_file, encoding="utf-8") as f:
        requirements = [line for line in f.read().splitlines() if line.strip()]
else:
    # Default requirements if file is not found
    requirements = [
        "requests>=2.31.0",
    ]

setup(
    name="quant_cloud_init",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "PyYAML>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "quant-cloud-init=quant_cloud_init.cli:main",
        ],
    },
    python_requires=">=3.10",
    description="Resolve Quant Cloud environment and image tags for a GitHub ref and log Docker into the registry",
)
