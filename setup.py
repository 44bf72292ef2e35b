from setuptools import setup, find_packages

setup(
    name="boolsearch",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "elasticsearch>=8.0.0",
        "pandas>=1.5.0",
        "pyarrow>=12.0.0",
        "pyyaml>=6.0",
        "click>=8.0.0",
        "tqdm>=4.65.0",
        "rich>=13.0.0",
        "tabulate>=0.9.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "elastic-transport>=8.0.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "boolsearch=boolsearch.presentation.cli.main:main",
        ],
    },
    python_requires=">=3.10",
)
