from setuptools import setup, find_packages

setup(
    name="pylocalization",
    version="0.1.0",
    description="pylocalization - dotted-key translation lookup with default and fallback languages",
    author="pylocalization Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.16.0",
        "rich>=13.7.1",
        "python-dotenv>=1.0.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.2",
        ],
    },
    entry_points={
        "console_scripts": [
            "pylocalization=pylocalization.apps.cli.app:app",  # команда `pylocalization`
        ],
    },
)
