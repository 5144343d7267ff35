from setuptools import find_packages, setup

setup(
    name="contentops",
    version="0.1.0",
    description="Link-processing statistics and reporting for content rewriting runs",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Report models and option validation
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "rich",  # Test runner script output
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
