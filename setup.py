from setuptools import find_packages, setup

setup(
    name="linkgate",
    version="0.1.0",
    description="Pre-commit gate that verifies links and images in staged markdown documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "linkgate.api.hook": ["pre-commit"],
    },
    python_requires=">=3.10",
    install_requires=[
        "requests",  # Network link checks
        "pydantic>=2",  # Config and output models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linkgate=linkgate.cli:main",
        ],
    },
)
