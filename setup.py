"""
Setup script for the rps-contract package.

Installs the rps_contract package from src/ together with its SQLite
registry schema and the rps-contract console script.
"""

from setuptools import setup, find_packages

setup(
    name="rps-contract",
    version="1.0.0",
    description="Rock-Paper-Scissors match contract - authorization and turn resolution over a key-value registry",
    author="rps-contract contributors",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    # Registry schema is read at runtime by init_database()
    package_data={
        "rps_contract._registry": ["schema.sql"],
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "rps-contract=rps_contract.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
