from setuptools import find_packages, setup

setup(
    name="syncalerts",
    version="0.1.0",
    description="Alert-state aggregation for failing transfers and conflicted files",
    packages=find_packages(include=["syncalerts", "syncalerts.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and status models
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "rich",  # Console output for scripts/test_unit.py
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
